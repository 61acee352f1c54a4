"""Redact secrets from streamed text as it arrives.

Run: python examples/basic/redact_stream.py
"""

import logging
import time
from collections.abc import Iterator

from streamreplace import ReplaceConfig, profiled_replace, replace_chunks, replace_config_context


def slow_stream() -> Iterator[str]:
    for chunk in ["token=hunt", "er2 user=adm", "in pass=hunter2\n"]:
        time.sleep(0.1)
        yield chunk


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    patterns = [("hunter2", "*******"), ("admin", "<user>")]

    with profiled_replace() as metrics, replace_config_context(ReplaceConfig(trace=True)):
        for ch in replace_chunks(slow_stream(), patterns):
            print(ch, end="", flush=True)

    print(metrics.summary())


if __name__ == "__main__":
    main()
