"""Basic usage example for pimatch."""

from pimatch import CompressionConfig, compress_with_stats, decompress, default_dictionary, render_segments


def main():
    pi = default_dictionary()

    # Example 1: Digit-friendly bytes
    print("=" * 60)
    print("Example 1: Bytes Found in Pi")
    print("=" * 60)

    data = bytes.fromhex("3141592653")
    config = CompressionConfig(verify=True)
    result = compress_with_stats(data, pi, config)

    print(f"Input:     {data!r}")
    print(f"Segments:  {render_segments(result.segments)}")
    print(f"Lossless:  {decompress(result.segments, pi) == data}")

    # Example 2: Ordinary text
    print("\n" + "=" * 60)
    print("Example 2: Text")
    print("=" * 60)

    data = "Hello, pi!".encode("utf-8")
    result = compress_with_stats(data, pi, config)

    print(f"Segments:        {render_segments(result.segments)}")
    print(f"Matched bytes:   {result.matched_bytes}/{result.original_length}")
    print(f"Expansion ratio: {result.expansion_ratio:.1f} chars per byte")

    # Example 3: Literal coalescing and indexed search
    print("\n" + "=" * 60)
    print("Example 3: Config Comparison")
    print("=" * 60)

    data = "ÿþ ok 1999".encode("utf-8")
    for name, cfg in [
        ("default", CompressionConfig()),
        ("index", CompressionConfig(search_mode="index")),
        ("coalesce", CompressionConfig(coalesce_raw=True)),
    ]:
        result = compress_with_stats(data, pi, cfg)
        print(f"{name:8s}: {len(result.segments)} segments, {result.match_count} matches")


if __name__ == "__main__":
    main()
