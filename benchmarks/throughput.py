import argparse
import random
import statistics
import time

from multitap import STANDARD_CONFIG, decode, encode


def generate_text(count: int, seed: int) -> str:
    rng = random.Random(seed)
    letters = list(STANDARD_CONFIG.reverse_mapping())
    return "".join(rng.choice(letters) for _ in range(count))


def main() -> None:
    parser = argparse.ArgumentParser(description="Multi-tap decode throughput benchmark")
    parser.add_argument("--letters", type=int, default=100_000)
    parser.add_argument("--runs", type=int, default=10)
    parser.add_argument("--seed", type=int, default=7)
    args = parser.parse_args()

    rates: list[float] = []
    input_lengths: list[int] = []

    for offset in range(args.runs):
        text = generate_text(args.letters, args.seed + offset)
        sequence = encode(text)
        start = time.perf_counter()
        decoded = decode(sequence)
        elapsed = time.perf_counter() - start
        if decoded != text:
            raise SystemExit("Round-trip mismatch.")
        rates.append(len(sequence) / elapsed)
        input_lengths.append(len(sequence))

    print(f"Runs: {args.runs}")
    print(f"Letters per run: {args.letters}")
    print(f"Mean input length: {statistics.mean(input_lengths):.0f} symbols")
    print(f"Mean throughput: {statistics.mean(rates):,.0f} symbols/s")
    print(f"Slowest run: {min(rates):,.0f} symbols/s")


if __name__ == "__main__":
    main()
