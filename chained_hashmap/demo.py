import argparse
import logging
import logging.config
import os
import sys
from typing import List, Optional

import psutil

from chained_hashmap.config import DEFAULT_HASH, LOGGING
from chained_hashmap.HashMap import HashMap
from chained_hashmap.hashing import HASH_FUNCTIONS
from chained_hashmap.logger.log_types import LogEvent
from chained_hashmap.logger.logger import log_demo_event


def get_memory_usage() -> int:
    """Return current process RSS memory usage in bytes."""
    process = psutil.Process(os.getpid())
    return process.memory_info().rss


def build_table(hash_name: str, fixed_size: Optional[int] = None) -> HashMap:
    if fixed_size is None:
        return HashMap(hash_function=hash_name)
    return HashMap(hash_function=hash_name, num_buckets=fixed_size, auto_resize=False)


def populate_prefixes(table: HashMap, word: str) -> None:
    """Map every prefix of word to the number of characters trimmed from it."""
    for trimmed in range(len(word)):
        table.put(word[:len(word) - trimmed], trimmed)


def count_lines(table: HashMap, input_path: str) -> None:
    with open(input_path, "r", encoding="utf-8") as fin:
        for line in fin:
            line = line.rstrip("\r\n")
            if not line:
                continue
            table.put(line, table.get(line, 0) + 1)


def format_buckets(buckets: List[list]) -> str:
    rows = []
    for idx, bucket in enumerate(buckets):
        entries = ", ".join(f"{key!r}: {value!r}" for key, value in bucket)
        rows.append(f"Bucket {idx}: [{entries}]")
    return "\n".join(rows)


def run_word_demo(table: HashMap, word: str) -> None:
    populate_prefixes(table, word)
    table.delete(word)
    print(format_buckets(table.buckets))


def run_count_demo(table: HashMap, input_path: str) -> None:
    count_lines(table, input_path)
    log_demo_event(
        LogEvent.LINES_COUNTED, get_memory_usage() / 1e6,
        size=table.size, bucket_count=table.bucket_count
    )
    for line, count in sorted(table.items()):
        print(f"{count}\t{line}")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Populate a chained hash map and print its buckets."
    )
    parser.add_argument(
        "-w",
        "--word",
        type=str,
        default="Rodrigo",
        help="Insert every prefix of this word, then delete the word itself",
    )
    parser.add_argument(
        "-i",
        "--input_file",
        type=str,
        help="Count distinct lines of this text file instead of running the word demo",
    )
    parser.add_argument(
        "--hash",
        choices=sorted(HASH_FUNCTIONS),
        default=DEFAULT_HASH,
        help="Hash function used to place keys into buckets",
    )
    parser.add_argument(
        "--fixed-size",
        type=int,
        help="Use this many buckets and never resize",
    )
    args = parser.parse_args(argv)
    if not args.word:
        parser.error("--word must not be empty")
    if args.fixed_size is not None and args.fixed_size < HashMap.MINIMUM_SIZE:
        parser.error(f"--fixed-size must be at least {HashMap.MINIMUM_SIZE}")
    return args


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.config.dictConfig(LOGGING)

    table = build_table(args.hash, args.fixed_size)
    log_demo_event(LogEvent.DEMO_STARTED, get_memory_usage() / 1e6)

    if args.input_file:
        run_count_demo(table, args.input_file)
    else:
        run_word_demo(table, args.word)

    log_demo_event(
        LogEvent.DEMO_FINISHED, get_memory_usage() / 1e6,
        size=table.size, bucket_count=table.bucket_count
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
