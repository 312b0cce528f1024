from haunt.clues.catalog import ClueCatalog
from haunt.clues.commands import run_plugin_command
from haunt.clues.registry import ClueRegistry
from haunt.debug import debug_logger
from haunt.debug.debug_logger import ClueDebug


def test_discover_is_idempotent(catalog) -> None:
    once = ClueRegistry(catalog)
    once.discover(2)

    twice = ClueRegistry(catalog)
    assert twice.discover(2) is True
    assert twice.discover(2) is False

    assert twice.known() == once.known()


def test_unknown_and_sentinel_ids_are_ignored(catalog) -> None:
    registry = ClueRegistry(catalog)

    assert registry.discover(0) is False
    assert registry.discover(42) is False
    assert registry.known() == ()
    assert registry.last() is None


def test_known_follows_discovery_order_not_catalog_order(catalog) -> None:
    registry = ClueRegistry(catalog)
    registry.discover(3)
    registry.discover(1)

    assert [c.id for c in registry.known()] == [3, 1]
    assert registry.last().id == 1


def test_discover_all_uses_catalog_order_and_never_duplicates(catalog) -> None:
    registry = ClueRegistry(catalog)

    assert registry.discover_all() == 3
    assert registry.discover_all() == 0
    registry.discover(2)

    assert [c.id for c in registry.known()] == [1, 2, 3]


def test_locked_door_then_key_scenario() -> None:
    catalog = ClueCatalog.from_records(
        [
            {"id": 1, "title": "Find the key", "text": "..."},
            {"id": 2, "title": "Locked door", "text": "..."},
        ]
    )
    registry = ClueRegistry(catalog)

    registry.discover(2)
    registry.discover(1)
    assert [c.title for c in registry.known()] == ["Locked door", "Find the key"]

    registry.discover_all()
    assert [c.title for c in registry.known()] == ["Locked door", "Find the key"]


def test_known_is_a_snapshot_consumers_cannot_mutate(catalog) -> None:
    registry = ClueRegistry(catalog)
    registry.discover(1)

    snapshot = registry.known()
    registry.discover(2)

    assert isinstance(snapshot, tuple)
    assert len(snapshot) == 1
    assert len(registry.known()) == 2


def test_discover_clue_command_parses_id(catalog) -> None:
    registry = ClueRegistry(catalog)

    assert run_plugin_command("DiscoverClue", ["2"], registry) is True
    assert [c.id for c in registry.known()] == [2]


def test_discover_clue_command_drops_bad_argument(catalog, capsys) -> None:
    registry = ClueRegistry(catalog)

    assert run_plugin_command("DiscoverClue", ["seven"], registry) is True
    assert run_plugin_command("DiscoverClue", [], registry) is True

    assert registry.known() == ()
    assert "not a clue id" in capsys.readouterr().out


def test_discover_all_clues_command(catalog) -> None:
    registry = ClueRegistry(catalog)
    registry.discover(3)

    run_plugin_command("DiscoverAllClues", [], registry)

    assert [c.id for c in registry.known()] == [3, 1, 2]


def test_other_plugin_commands_are_not_ours(catalog) -> None:
    registry = ClueRegistry(catalog)

    assert run_plugin_command("AddToTraitLevel", ["1", "0.3"], registry) is False
    assert registry.known() == ()


def test_debug_snapshots_list_known_clues(catalog, capsys) -> None:
    registry = ClueRegistry(catalog)
    registry.discover(2)

    debug = ClueDebug()
    debug.catalog_snapshot(catalog)
    debug.registry_snapshot(registry)

    out = capsys.readouterr().out
    assert "[HAUNT CLUES] [CATALOG]" in out
    assert "#0 [2] 'Locked door'" in out
    assert "last: 2" in out


def test_discover_with_non_integer_id_is_a_no_op(catalog) -> None:
    registry = ClueRegistry(catalog)

    assert registry.discover("abc") is False
    assert registry.discover(True) is False
    assert registry.known() == ()


def test_muted_category_prints_nothing(catalog, capsys, monkeypatch) -> None:
    monkeypatch.setattr(
        debug_logger, "ENABLED_CATEGORIES", set(debug_logger.ENABLED_CATEGORIES)
    )
    registry = ClueRegistry(catalog)

    debug_logger.disable_categories("clues")
    registry.discover(99)
    assert capsys.readouterr().out == ""

    debug_logger.enable_categories("clues")
    registry.discover(99)
    assert "[HAUNT CLUES]" in capsys.readouterr().out


def test_set_categories_replaces_enabled_channels(catalog, capsys, monkeypatch) -> None:
    monkeypatch.setattr(
        debug_logger, "ENABLED_CATEGORIES", set(debug_logger.ENABLED_CATEGORIES)
    )

    debug_logger.set_categories({"commands"})
    run_plugin_command("DiscoverClue", ["99"], ClueRegistry(catalog))

    out = capsys.readouterr().out
    assert "[HAUNT CLUES]" not in out
    assert debug_logger.ENABLED_CATEGORIES == {"commands"}


def test_discover_clue_command_rejects_trailing_junk(catalog, capsys) -> None:
    registry = ClueRegistry(catalog)

    run_plugin_command("DiscoverClue", ["2abc"], registry)
    run_plugin_command("DiscoverClue", [" 3 "], registry)

    assert [c.id for c in registry.known()] == [3]
    assert "'2abc' is not a clue id" in capsys.readouterr().out
