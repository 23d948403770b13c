from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass

import httpx

DEFAULT_TIMEOUT_S = 30.0


@dataclass
class SmokeResult:
    name: str
    ok: bool
    details: str


def normalize_base_url(base_url: str) -> str:
    return base_url.rstrip("/")


def build_endpoints(base_url: str) -> dict[str, str]:
    normalized = normalize_base_url(base_url)
    return {
        "health": f"{normalized}/v1/health",
        "sources": f"{normalized}/v1/sources",
        "feed": f"{normalized}/",
    }


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser()
    parser.add_argument("--base-url", required=True)
    parser.add_argument("--source", default="datiya")
    return parser


def _check_health(client: httpx.Client, endpoints: dict[str, str]) -> SmokeResult:
    response = client.request("GET", endpoints["health"])
    if response.status_code != 200:
        return SmokeResult("health", False, f"status={response.status_code}")
    return SmokeResult("health", True, "ok")


def _check_sources(client: httpx.Client, endpoints: dict[str, str]) -> SmokeResult:
    response = client.request("GET", endpoints["sources"])
    if response.status_code != 200:
        return SmokeResult("sources", False, f"status={response.status_code}")
    try:
        payload = response.json()
    except ValueError:
        return SmokeResult("sources", False, "invalid json")
    if "sources" not in payload:
        return SmokeResult("sources", False, "missing sources list")
    return SmokeResult("sources", True, f"sources={len(payload['sources'])}")


def _check_feed(client: httpx.Client, endpoints: dict[str, str], source: str) -> SmokeResult:
    response = client.request("GET", endpoints["feed"], params={"source": source})
    details = (
        f"status={response.status_code} "
        f"content-type={response.headers.get('content-type', '-')} "
        f"bytes={len(response.content)}"
    )
    if response.status_code == 500:
        return SmokeResult("feed", False, f"{details} body={response.text[:200]}")
    return SmokeResult("feed", True, details)


def run_smoke(base_url: str, source: str) -> int:
    endpoints = build_endpoints(base_url)
    results: list[SmokeResult] = []
    try:
        with httpx.Client(timeout=DEFAULT_TIMEOUT_S) as client:
            results.append(_check_health(client, endpoints))
            results.append(_check_sources(client, endpoints))
            results.append(_check_feed(client, endpoints, source))
    except httpx.RequestError as exc:
        print(f"Network error: {exc}")
        return 1

    ok = True
    print("Smoke report:")
    for result in results:
        print(f"- {result.name}: {'PASS' if result.ok else 'FAIL'} ({result.details})")
        ok = ok and result.ok
    return 0 if ok else 1


def main() -> None:
    parser = create_parser()
    args = parser.parse_args()
    sys.exit(run_smoke(args.base_url, args.source))


if __name__ == "__main__":
    main()
