# run_example.py
from __future__ import annotations

import argparse
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

# --- ensure project root is importable ---
ROOT = Path(__file__).resolve().parents[1]
os.chdir(ROOT)
sys.path.insert(0, str(ROOT))

import pygame

from sequencer import CommandRegistry, Sequencer, SequencerConfig, EventRouter
from sequencer.clock import FrameClock
from sequencer.commands import register_default_commands, wire_flow
from sequencer.debug_logger import SequencerDebug, set_categories
from sequencer.input import MouseClickInput
from sequencer.router import Topic, Unsubscribe, unsubscribe_all


EXAMPLE_SCRIPT: List[str] = [
    "Log|Pikachu",
    "Log|Raichu",
    "Create|cube|0|1|2",
    "SetPosition|1|2|3",
    "Move|-1|0|1|1|OUT_QUAD",
    "Jump|7",
    "Log|this line is skipped",
    "Log|jumped here",
    "Wait|1",
    "Label|loop",
    "Click",
    "Move|2|1|0|0.5|IN_OUT_QUAD",
    "Click",
    "Move|1|2|3|0.5",
]

UNITS_PX = 80  # world unit -> screen pixels


@dataclass
class ExampleConfig:
    window_size: tuple[int, int] = (800, 600)
    fps: int = 60
    separator: str = "|"
    debug_categories: set[str] = field(default_factory=lambda: {"sequencer", "script", "command", "harness"})
    loop: bool = False


class CubeView:
    """Host-side state for the one object the example script drives."""

    def __init__(self) -> None:
        self.name: Optional[str] = None
        self.pos = pygame.Vector3()
        self._move_from = pygame.Vector3()
        self._move_to = pygame.Vector3()

    def attach(self, router: EventRouter) -> List[Unsubscribe]:
        return [
            router.subscribe(Topic.OBJECT_CREATE, self._on_create),
            router.subscribe(Topic.OBJECT_SET_POSITION, self._on_set_position),
            router.subscribe(Topic.OBJECT_MOVE_START, self._on_move_start),
            router.subscribe(Topic.OBJECT_MOVE, self._on_move),
            router.subscribe(Topic.OBJECT_MOVE_END, self._on_move_end),
        ]

    def _on_create(self, topic: str, payload: Dict[str, Any]) -> None:
        self.name = payload["name"]
        self.pos = pygame.Vector3(payload["pos"])

    def _on_set_position(self, topic: str, payload: Dict[str, Any]) -> None:
        self.pos = pygame.Vector3(payload["pos"])

    def _on_move_start(self, topic: str, payload: Dict[str, Any]) -> None:
        self._move_from = pygame.Vector3(self.pos)
        self._move_to = pygame.Vector3(payload["pos"])

    def _on_move(self, topic: str, payload: Dict[str, Any]) -> None:
        self.pos = self._move_from.lerp(self._move_to, payload["amount"])

    def _on_move_end(self, topic: str, payload: Dict[str, Any]) -> None:
        self.pos = pygame.Vector3(self._move_to)

    def draw(self, surface: pygame.Surface, font: pygame.font.Font) -> None:
        if self.name is None:
            return
        cx, cy = surface.get_rect().center
        # z pushes the cube "away": smaller and dimmer
        size = max(8, int(48 - self.pos.z * 6))
        rect = pygame.Rect(0, 0, size, size)
        rect.center = (int(cx + self.pos.x * UNITS_PX), int(cy - self.pos.y * UNITS_PX))
        shade = max(60, 220 - int(self.pos.z * 20))
        pygame.draw.rect(surface, (shade, shade, 255), rect)
        label = font.render(self.name, True, (255, 255, 255))
        surface.blit(label, (rect.x, rect.bottom + 4))


def _parse_size(s: str) -> tuple[int, int]:
    try:
        a, b = s.lower().replace("x", " ").split()
        return int(a), int(b)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected WxH (e.g. 800x600), got: {s!r}")


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Script sequencer example harness")
    p.add_argument("--window", default="800x600", type=_parse_size, help="Window size WxH")
    p.add_argument("--fps", default=60, type=int, help="Target frame rate")
    p.add_argument("--debug", default="sequencer,script,command,harness",
                   help="Comma-separated debug categories ('' for none)")
    p.add_argument("--loop", action="store_true", help="Restart the script when it ends")
    return p


def config_from_args(argv: list[str] | None = None) -> ExampleConfig:
    args = build_arg_parser().parse_args(argv)
    cats = {c.strip() for c in args.debug.split(",") if c.strip()}
    return ExampleConfig(
        window_size=args.window,
        fps=args.fps,
        debug_categories=cats,
        loop=args.loop,
    )


def main(argv: list[str] | None = None) -> int:
    cfg = config_from_args(argv if argv is not None else sys.argv[1:])
    set_categories(cfg.debug_categories)
    debug = SequencerDebug()

    pygame.init()
    pygame.display.set_caption("Script Sequencer Example")
    screen = pygame.display.set_mode(cfg.window_size)
    font = pygame.font.SysFont("consolas", 16)

    clock = FrameClock(fps=cfg.fps)
    router = EventRouter()
    mouse = MouseClickInput(button=1)
    cube = CubeView()
    handles = cube.attach(router)

    registry = register_default_commands(CommandRegistry(), router, clock, mouse.pressed)
    seq = Sequencer(registry, SequencerConfig(separator=cfg.separator, validate_on_start=True))
    handles += wire_flow(router, seq)

    def _on_end() -> None:
        debug.harness("script finished")
        if cfg.loop:
            seq.restart()

    seq.add_end_listener(_on_end)
    seq.start(EXAMPLE_SCRIPT)

    running = True
    while running:
        clock.tick()

        events = pygame.event.get()
        mouse.feed(events)
        for e in events:
            if e.type == pygame.QUIT:
                running = False
            elif e.type == pygame.KEYDOWN and e.key == pygame.K_ESCAPE:
                running = False
            elif e.type == pygame.KEYDOWN and e.key == pygame.K_e:
                seq.end()
            elif e.type == pygame.KEYDOWN and e.key == pygame.K_r:
                seq.restart()
            elif e.type == pygame.KEYDOWN and e.key == pygame.K_l:
                seq.jump_to_index(seq.find_index_of_tag(0, "loop", 1))
            elif e.type == pygame.KEYDOWN and e.key == pygame.K_F1:
                debug.snapshot(seq)

        seq.tick()

        screen.fill((16, 16, 24))
        cube.draw(screen, font)

        current = seq.store[seq.current_index] if seq.current_index < seq.count else "<end>"
        hud = [
            f"{clock.get_fps():5.1f} FPS",
            f"line {seq.current_index}/{seq.count}: {current}",
            f"state={seq.state.value}",
            "click = continue   E end   R restart   L jump to loop   F1 dump   ESC quit",
        ]
        y = 8
        for line in hud:
            screen.blit(font.render(line, True, (255, 255, 255)), (10, y))
            y += 18

        pygame.display.flip()

    seq.dispose()
    unsubscribe_all(handles)
    pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
