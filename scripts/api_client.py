"""Lightweight REST client for the pysquads API."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import httpx


def build_mapping(raw: str) -> dict[str, str]:
    if not raw:
        return {}
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Invalid mapping JSON: {exc}") from exc


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the pysquads REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("roster", type=Path, nargs="?", help="Roster CSV")
    parser.add_argument("--format", dest="match_format", default=None, help="Match format (e.g., 7v7)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for a reproducible split")
    parser.add_argument("--iterations", type=int, default=None, help="Annealing iteration budget")
    parser.add_argument("--roster-mapping", default="", help="JSON mapping for roster columns")
    parser.add_argument("--list-formats", action="store_true", help="List supported match formats and exit")
    args = parser.parse_args()

    with httpx.Client(base_url=args.base_url) as client:
        if args.list_formats:
            resp = client.get("/formats")
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2))
            return

        if args.roster is None:
            raise SystemExit("roster file is required unless using --list-formats")

        files = {"roster": (args.roster.name, args.roster.read_bytes(), "text/csv")}
        data: dict[str, str] = {}
        mapping = build_mapping(args.roster_mapping)
        if mapping:
            data["roster_mapping"] = json.dumps(mapping)
        if args.match_format:
            data["format"] = args.match_format
        if args.seed is not None:
            data["seed"] = str(args.seed)
        if args.iterations is not None:
            data["iterations"] = str(args.iterations)

        resp = client.post("/teams/csv", files=files, data=data)
        if resp.status_code == 400:
            raise SystemExit(f"Request rejected: {resp.json().get('detail')}")
        resp.raise_for_status()
        payload = resp.json()
        print(f"Imbalance {payload['imbalance']:.3f} (seed split {payload['initial_imbalance']:.3f})")
        print("Team A:", ", ".join(payload["team_a"]))
        print("Team B:", ", ".join(payload["team_b"]))
        print(json.dumps({"summary_a": payload["summary_a"], "summary_b": payload["summary_b"]}, indent=2))


if __name__ == "__main__":
    main()
