import argparse
import random
import statistics
import time

from pimatch import CompressionConfig, compress_with_stats, default_dictionary, load_dictionary


def generate_bytes(count: int, decimal_only: bool, seed: int) -> bytes:
    rng = random.Random(seed)
    if decimal_only:
        return bytes(rng.randrange(10) * 16 + rng.randrange(10) for _ in range(count))
    return bytes(rng.randrange(256) for _ in range(count))


def main() -> None:
    parser = argparse.ArgumentParser(description="pimatch expansion ratio benchmark")
    parser.add_argument("--bytes", type=int, default=256)
    parser.add_argument("--runs", type=int, default=10)
    parser.add_argument("--seed", type=int, default=7)
    parser.add_argument("--decimal-only", action="store_true")
    parser.add_argument("--search", choices=["scan", "index"], default="scan")
    parser.add_argument("--dictionary", default=None)
    args = parser.parse_args()

    dictionary = load_dictionary(args.dictionary) if args.dictionary else default_dictionary()
    cfg = CompressionConfig(search_mode=args.search)

    ratios: list[float] = []
    match_shares: list[float] = []
    elapsed: list[float] = []

    for offset in range(args.runs):
        data = generate_bytes(args.bytes, args.decimal_only, args.seed + offset)
        start = time.perf_counter()
        result = compress_with_stats(data, dictionary, cfg)
        elapsed.append(time.perf_counter() - start)
        ratios.append(result.expansion_ratio)
        match_shares.append(result.matched_bytes / result.original_length)

    print(f"Runs: {args.runs}")
    print(f"Bytes per run: {args.bytes}")
    print(f"Dictionary digits: {len(dictionary)}")
    print(f"Search: {args.search}")
    print(f"Mean expansion ratio: {statistics.mean(ratios):.4f}")
    print(f"Mean matched share: {statistics.mean(match_shares):.4f}")
    print(f"Mean time per run: {statistics.mean(elapsed) * 1000:.2f} ms")


if __name__ == "__main__":
    main()
