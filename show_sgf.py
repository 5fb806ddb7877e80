# show_sgf.py
from __future__ import annotations
import argparse
import sys
from pathlib import Path
from loguru import logger

from go_kifu.core.coords import xy_to_display
from go_kifu.core.replay import load_record
from go_kifu.core.board import BLACK, WHITE
from go_kifu.core.turn import color_name, turn_after
from go_kifu.sgf.writer import extract_main_route
from go_kifu.utils.config import EngineConfig, load_config
from go_kifu.utils.render import render_ascii


def main():
    parser = argparse.ArgumentParser("Replay the main line of an SGF record")
    parser.add_argument("sgf", type=str, help="path to .sgf file")
    parser.add_argument("--cfg", type=str, default=None, help="configs/default.yaml")
    parser.add_argument("--moves", type=int, default=None, help="stop after N moves")
    parser.add_argument("--main-line", action="store_true", help="print the branch-free SGF instead")
    args = parser.parse_args()

    cfg = load_config(args.cfg) if args.cfg else EngineConfig()
    logger.remove()
    logger.add(sys.stderr, level=str(cfg.LOG.get("level", "INFO")))

    text = Path(args.sgf).read_text(encoding="utf-8")
    if args.main_line:
        print(extract_main_route(text))
        return

    record = load_record(text, strict=bool(cfg.STRICT), default_size=int(cfg.BOARD_SIZE))
    up_to = args.moves if args.moves is not None else cfg.MAX_MOVES
    replay = record.replay(up_to=up_to)
    logger.info(f"{args.sgf}: size={record.size}, setup={len(record.setup)}, "
                f"moves={len(record.moves)}, replayed={replay.moves_applied}")

    last = replay.last_move
    print(render_ascii(replay.board, last_move=last.point if last else None))
    if last is not None:
        print(f"Last move: {color_name(last.color)} {xy_to_display(last.x, last.y, record.size)}")
    print(f"Captures - black: {replay.captures[BLACK]}, white: {replay.captures[WHITE]}")
    print(f"Next: {color_name(turn_after(text, replay.moves_applied))}")


if __name__ == "__main__":
    main()
