"""Walk through the three ways of using the client against a live endpoint."""

from __future__ import annotations

import logging
import os

import resteasy
from resteasy import Failure, RestClient, default_client, with_default_client

BASE_URL = os.getenv("RESTEASY_DEMO_URL", "https://httpbin.org")


def log_section(title: str) -> None:
    print("\n" + "=" * 80)
    print(title)
    print("=" * 80)


def show(result: resteasy.Result[str]) -> None:
    if isinstance(result, Failure):
        print(f"failed: {type(result.error).__name__}: {result.error}")
    else:
        print(result.value[:400])


def caller_owned() -> None:
    log_section("Caller-owned client")
    client = default_client(default_headers={"User-Agent": "resteasy-demo"}, log_level="debug")
    try:
        show(client.get(f"{BASE_URL}/get"))
        show(client.post(f"{BASE_URL}/post", "hello", {"Content-Type": "text/plain"}))
        show(client.get(f"{BASE_URL}/status/500"))
    finally:
        client.end()


def scoped() -> None:
    log_section("Scoped client")

    def work(client: RestClient) -> resteasy.Result[str]:
        client.put(f"{BASE_URL}/put", "updated")
        return client.delete(f"{BASE_URL}/delete")

    show(with_default_client(work))


def one_shot() -> None:
    log_section("One-shot calls")
    show(resteasy.get(f"{BASE_URL}/delay/5", timeout_seconds=1))
    show(resteasy.get("http://127.0.0.1:9/unreachable", timeout_seconds=2))


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(levelname)s %(name)s %(message)s")
    caller_owned()
    scoped()
    one_shot()


if __name__ == "__main__":
    main()
