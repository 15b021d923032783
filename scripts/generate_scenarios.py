import argparse
import json
from pathlib import Path

from multitap import decode, encode


def main(words_path: str, out_path: str) -> None:
    path = Path(words_path)
    words = [line.strip().upper() for line in path.read_text(encoding="utf-8").splitlines()]
    items = []
    for word in words:
        if not word or not word.isalpha() or not word.isascii():
            continue
        sequence = encode(word)
        if decode(sequence) != word:
            raise ValueError(f"Round-trip mismatch for {word!r}.")
        items.append({"id": word.lower(), "input": sequence, "expected": word})

    out = Path(out_path)
    out.parent.mkdir(parents=True, exist_ok=True)
    with out.open("w", encoding="utf-8") as handle:
        for item in items:
            handle.write(json.dumps(item) + "\n")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Write multi-tap decode scenarios from a word list")
    parser.add_argument("--words", default="/usr/share/dict/words")
    parser.add_argument("--out", default="tests/fixtures/scenarios/generated.jsonl")
    args = parser.parse_args()
    main(args.words, args.out)
