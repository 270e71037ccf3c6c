# main.py

import argparse
import sys

import config
from game_manager import GameManager
from sensor import SkeletonSensor
from word_game import load_word_bank


def build_parser():
    parser = argparse.ArgumentParser(description="Hand-controlled menu and falling-word vocabulary game")
    parser.add_argument('app', nargs='?', choices=['menu', 'words'], default='menu',
                        help="menu: gesture main menu, words: falling-word game")
    parser.add_argument('--camera', type=int, default=None,
                        help="camera index to use instead of probing")
    parser.add_argument('--words', default=None,
                        help="JSON file mapping each word to its meanings (correct one first)")
    parser.add_argument('--refire', action='store_true',
                        help="fire menu buttons every frame while the hand dwells on them")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    word_meanings = None
    if args.words:
        try:
            word_meanings = load_word_bank(args.words)
        except (OSError, ValueError) as e:
            print(f"\n--- ERROR: Could not load word bank '{args.words}': {e} ---\n")
            return 1

    indices = (args.camera,) if args.camera is not None else config.CAMERA_INDICES
    manager = GameManager(
        start_app=args.app,
        sensor=SkeletonSensor(camera_indices=indices),
        word_meanings=word_meanings,
        refire=args.refire or config.REFIRE_WHILE_DWELLING,
    )
    manager.run()
    return 0


if __name__ == '__main__':
    sys.exit(main())
