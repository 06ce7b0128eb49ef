"""
Word Puzzle Game - Main Entry Point

Parses the command line, sets up the game service and runs one interactive
session in the terminal.

usage:
  wordle-game                      # 5 letters, 6 attempts, random word
  wordle-game 7 8                  # 7 letters, 8 attempts
  wordle-game 5 6 crane            # force the puzzle word
  wordle-game --words words.txt    # use another dictionary
"""

import argparse
import sys
from typing import List, Optional

from . import create_game_service
from .config import Config, config
from .controllers.game_controller import GameController
from .exceptions import WordleError
from .utils.game_logger import game_logger
from .utils.helpers import parse_or_default


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='wordle-game',
        description='Guess the hidden word within a limited number of attempts.'
    )
    parser.add_argument('word_length', nargs='?', default=None,
                        help=f'letters per word (default {Config.DEFAULT_WORD_LENGTH})')
    parser.add_argument('max_attempts', nargs='?', default=None,
                        help=f'number of guesses allowed (default {Config.DEFAULT_MAX_ATTEMPTS})')
    parser.add_argument('word', nargs='?', default=None,
                        help='force the puzzle word (ignored unless it fits the length)')
    parser.add_argument('--words', dest='word_file', default=None,
                        help='dictionary file: JSON array or one word per line')
    parser.add_argument('--seed', type=int, default=None, help='seed for reproducible games')
    parser.add_argument('--no-color', action='store_true', help='plain tiles instead of ANSI colours')
    parser.add_argument('--env', choices=sorted(config), default='default', help='configuration profile')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = config[args.env]

    word_length = parse_or_default(args.word_length, settings.DEFAULT_WORD_LENGTH)
    max_attempts = parse_or_default(args.max_attempts, settings.DEFAULT_MAX_ATTEMPTS)
    use_color = settings.USE_COLOR and not args.no_color
    game_logger.configure(settings.LOG_DIR, settings.LOG_LEVEL)

    try:
        game_service = create_game_service(settings, word_file=args.word_file, seed=args.seed)
        game_id = game_service.create_new_game(word_length, max_attempts, args.word)
        game_logger.log_user_action(
            'new_game', game_id, word_length=word_length, max_attempts=max_attempts,
            forced_word=args.word is not None
        )

        GameController(game_service, game_id, use_color=use_color).play()
    except WordleError as e:
        game_logger.log_error(e, 'play')
        print(f"Game crashed: {e}")
        return 1
    except KeyboardInterrupt:
        print()
        return 130

    return 0


if __name__ == '__main__':
    sys.exit(main())
