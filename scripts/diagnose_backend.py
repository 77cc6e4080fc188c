import argparse
import asyncio
import os
import sys
import time

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from meetsum.api_client import BackendClient
from meetsum.config import DEFAULT_CONFIG_PATH, load_config
from meetsum.errors import TransportError


def main() -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="Config path.")
    parser.add_argument("--api-base", help="Backend base URL override.")
    parser.add_argument(
        "--transcript",
        default="Alice: ship on Friday. Bob: agreed, I will update the docs.",
        help="Transcript text to summarize.",
    )
    parser.add_argument(
        "--prompt", default="Summarize in bullets", help="Custom instruction."
    )
    args = parser.parse_args()

    config = load_config(args.config)
    client = BackendClient(
        args.api_base or config.api_base, timeout=config.request_timeout_s
    )
    print(f"Backend: {client.base_url}")

    started = time.time()
    try:
        result = asyncio.run(client.summarize(args.transcript, args.prompt))
    except TransportError as exc:
        print(f"Failed: {exc}")
        return 1
    elapsed = time.time() - started
    print(f"Summary id: {result.summary_id}")
    print(f"Summary chars: {len(result.summary)}")
    print(f"Elapsed: {elapsed:.2f}s")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
