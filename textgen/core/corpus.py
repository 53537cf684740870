from pathlib import Path
from typing import Iterator

# Streams a corpus file one character at a time.
# newline="" keeps '\r' so the model sees raw line endings and drops them itself.

def read_corpus(path: str | Path, encoding: str = "utf-8", chunk_size: int = 8192) -> Iterator[str]:
    with open(path, "r", encoding=encoding, newline="") as fh:
        while True:
            chunk = fh.read(chunk_size)
            if not chunk:
                return
            yield from chunk
