import os
import sys
from pathlib import Path

# --- ensure project root is importable ---
ROOT = Path(__file__).resolve().parents[1]
os.chdir(ROOT)
sys.path.insert(0, str(ROOT))

import pygame
from haunt.clues.commands import run_plugin_command
from haunt.clues.registry import ClueRegistry
from haunt.data.loader import load_clue_catalog
from haunt.debug import debug_logger
from haunt.debug.debug_logger import ClueDebug
from haunt.save.save_state import SaveContents, load_from_file, save_to_file, slot_path
from haunt.scene.clue_scene import ClueScene
from haunt.settings import CLUES_PATH, FONT_NAME, FONT_SIZE, SCREEN_W, SCREEN_H


def main() -> int:
    pygame.init()
    pygame.display.set_caption("Haunt: Island - Clues")

    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    clock = pygame.time.Clock()
    font = pygame.font.Font(FONT_NAME, FONT_SIZE)
    hud_font = pygame.font.SysFont("consolas", 16)

    catalog = load_clue_catalog(CLUES_PATH)
    registry = ClueRegistry(catalog)
    debug = ClueDebug()
    debug.catalog_snapshot(catalog)

    running = True

    def on_close() -> None:
        nonlocal running
        running = False

    scene = ClueScene(registry, font, (SCREEN_W, SCREEN_H), on_close=on_close)
    scene.open()

    while running:
        dt = clock.tick(60) / 1000.0

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                running = False
            elif e.type == pygame.KEYDOWN and e.key == pygame.K_F1:
                # F1: discover the next undiscovered clue, like an event would
                for clue in catalog.all():
                    if not registry.is_known(clue.id):
                        run_plugin_command("DiscoverClue", [str(clue.id)], registry)
                        break
                scene.list_view.refresh()
            elif e.type == pygame.KEYDOWN and e.key == pygame.K_F2:
                run_plugin_command("DiscoverAllClues", [], registry)
                scene.list_view.refresh()
            elif e.type == pygame.KEYDOWN and e.key == pygame.K_F3:
                debug.registry_snapshot(registry)
            elif e.type == pygame.KEYDOWN and e.key == pygame.K_F4:
                # mute / unmute the discovery chatter
                if "clues" in debug_logger.ENABLED_CATEGORIES:
                    debug_logger.disable_categories("clues")
                else:
                    debug_logger.enable_categories("clues")
            elif e.type == pygame.KEYDOWN and e.key == pygame.K_F5:
                save_to_file(SaveContents(clues=registry), slot_path(1))
                print(f"[SAVE] wrote {slot_path(1)}")
            elif e.type == pygame.KEYDOWN and e.key == pygame.K_F9:
                if os.path.exists(slot_path(1)):
                    registry = load_from_file(slot_path(1), catalog).clues
                    scene.registry = registry
                    scene.list_view.registry = registry
                    scene.open()
            else:
                scene.handle_event(e)

        scene.update(dt)

        screen.fill((0, 0, 0))
        scene.draw(screen)
        hud = "F1 discover next   F2 discover all   F3 dump   F4 mute   F5 save   F9 load   ESC back"
        screen.blit(hud_font.render(hud, True, (255, 255, 255)), (10, SCREEN_H - 22))
        pygame.display.flip()

    pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
