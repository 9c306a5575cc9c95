#!/usr/bin/env python3
"""
Neon Pong Launcher

Plays the simulation in a pygame window with mouse and keyboard input.

Usage:
    python play.py
    python play.py --resolution 1280x800 --seed 42
    python play.py --config arena.yaml --win-score 3

Controls:
    Mouse / Up / Down / W / S   Move paddle
    Space / Enter               Start (or play again after a match)
    R                           Restart match
    F                           Toggle fullscreen
    Esc                         Quit
"""

import argparse
import sys
from typing import List, Optional

import pygame

from neon_pong import ConfigurationError, MatchState, Simulation, build_config, load_config
from neon_pong.input.input_event import Command
from neon_pong.input.sources.pygame_source import PygameInputSource
from neon_pong.logging import close_all_sinks, create_sink_for_environment, get_logger, register_sink
from neon_pong.skins import SKINS

log = get_logger('launcher')


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse launcher arguments."""
    parser = argparse.ArgumentParser(
        description='Neon Pong - player vs CPU',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python play.py                         # Default 960x600 window
  python play.py --resolution 1920x1200  # Bigger window, same playfield
  python play.py --seed 7                # Reproducible serves and CPU drift
        """
    )
    parser.add_argument(
        '--resolution', '-r',
        type=str,
        default='960x600',
        help='Window resolution as WIDTHxHEIGHT (default: 960x600)'
    )
    parser.add_argument(
        '--fullscreen', '-f',
        action='store_true',
        help='Run in fullscreen mode'
    )
    parser.add_argument(
        '--config', '-c',
        type=str,
        default=None,
        help='YAML file with simulation settings'
    )
    parser.add_argument(
        '--seed',
        type=int,
        default=None,
        help='Random seed for serves and CPU drift'
    )
    parser.add_argument(
        '--win-score',
        type=int,
        default=None,
        help='Points needed to win (default: 7)'
    )
    parser.add_argument(
        '--skin',
        type=str,
        default='neon',
        choices=sorted(SKINS),
        help='Visual skin'
    )
    return parser.parse_args(argv)


def parse_resolution(value: str) -> tuple:
    """Parse WIDTHxHEIGHT into integers."""
    width, height = value.lower().split('x')
    return int(width), int(height)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the launcher."""
    args = parse_args(argv)

    try:
        display_width, display_height = parse_resolution(args.resolution)
    except ValueError:
        print(f"Invalid resolution format: {args.resolution}")
        print("Expected format: WIDTHxHEIGHT (e.g., 1280x800)")
        return 1

    overrides = {
        k: v for k, v in (('seed', args.seed), ('win_score', args.win_score))
        if v is not None
    }
    try:
        if args.config:
            config = load_config(args.config, **overrides)
        else:
            config = build_config(None, **overrides)
    except (FileNotFoundError, ConfigurationError) as e:
        print(f"ERROR: Invalid configuration: {e}")
        return 1

    register_sink('match', create_sink_for_environment('match'))

    pygame.init()
    if args.fullscreen:
        screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        display_width, display_height = screen.get_size()
    else:
        screen = pygame.display.set_mode((display_width, display_height))
    pygame.display.set_caption("Neon Pong")

    sim = Simulation(config)
    skin = SKINS[args.skin]()
    input_source = PygameInputSource(display_height)

    log.info("Resolution %dx%d, playfield %gx%g, first to %d",
             display_width, display_height,
             config.playfield_width, config.playfield_height, config.win_score)

    clock = pygame.time.Clock()
    running = True

    try:
        while running:
            dt = clock.tick(60) / 1000.0

            input_source.update(dt)
            for command in input_source.poll_commands():
                if command is Command.QUIT:
                    running = False
                elif command is Command.RESTART:
                    sim.restart()
                elif command is Command.START:
                    if sim.state is MatchState.GAME_OVER:
                        sim.restart()
                    sim.start()

            # Events the input source did not consume
            for event in pygame.event.get():
                if event.type == pygame.KEYDOWN and event.key == pygame.K_f:
                    pygame.display.toggle_fullscreen()
                    input_source.set_display_height(screen.get_height())

            for player_input in input_source.poll_events():
                sim.submit_player_input(player_input)

            events = sim.tick(dt)
            skin.on_events(events)
            skin.update(dt)

            skin.render(sim.snapshot(), screen)
            pygame.display.flip()
    finally:
        close_all_sinks()
        pygame.quit()

    score = sim.score
    print(f"Final score: player {score.player} - cpu {score.cpu}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
