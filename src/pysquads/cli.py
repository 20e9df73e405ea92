"""Command-line interface for splitting a roster CSV into two teams."""

from __future__ import annotations

import argparse
import csv
import json
import logging
from dataclasses import asdict
from pathlib import Path

from pysquads.balancer import AttributeModel, TeamAssignment, TeamBalancingError, assign_teams
from pysquads.config import load_balancer_config
from pysquads.config_loader import BalancerProfile
from pysquads.ingest import load_records_from_csv
from pysquads.models import PlayerRecord


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Split a rated roster into two balanced teams")
    parser.add_argument("roster", type=Path, help="Path to roster CSV")
    parser.add_argument("--format", dest="match_format", default=None, help="Match format (e.g., 5v5, 7v7)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for a reproducible split")
    parser.add_argument("--iterations", type=int, default=None, help="Annealing iteration budget")
    parser.add_argument(
        "--column",
        action="append",
        default=[],
        help="Mapping for roster CSV columns (e.g., name=First Name|Last Name)",
    )
    parser.add_argument("--load-profile", type=Path, help="Load mapping/weights JSON", default=None)
    parser.add_argument("--save-profile", type=Path, help="Save mapping/weights JSON", default=None)
    parser.add_argument("--output", type=Path, default=None, help="Optional CSV path for the assignment")
    parser.add_argument("--json", action="store_true", help="Print the assignment as JSON")
    parser.add_argument("--verbose", action="store_true", help="Log balancer progress")
    return parser.parse_args(argv)


def _parse_mapping(entries: list[str]) -> dict[str, str]:
    mapping: dict[str, str] = {}
    for entry in entries:
        if "=" not in entry:
            raise ValueError(f"Invalid mapping entry '{entry}', expected key=value")
        key, value = entry.split("=", 1)
        mapping[key.strip()] = value.strip()
    return mapping


def _assignment_payload(assignment: TeamAssignment) -> dict:
    return {
        "team_a": list(assignment.team_a),
        "team_b": list(assignment.team_b),
        "imbalance": assignment.imbalance,
        "initial_imbalance": assignment.initial_imbalance,
        "breakdown": asdict(assignment.breakdown),
        "summary_a": asdict(assignment.summary_a),
        "summary_b": asdict(assignment.summary_b),
        "iterations": assignment.iterations,
        "seed": assignment.seed,
    }


def _print_team(label: str, ids: tuple[str, ...], lookup: dict[str, PlayerRecord], model: AttributeModel) -> None:
    players = [lookup[pid] for pid in ids]
    print(label)
    print("-" * 40)
    for player in sorted(players, key=model.composite_score, reverse=True):
        print(f"  {model.position_of(player).value:<4} {player.name or player.player_id:<24} {model.composite_score(player):5.2f}")
    print("")


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    try:
        roster_mapping = _parse_mapping(args.column)
        profile = BalancerProfile()
        if args.load_profile:
            profile = BalancerProfile.load(args.load_profile)
            roster_mapping = profile.roster_mapping | roster_mapping

        config = profile.apply(load_balancer_config())
        if args.iterations is not None:
            config = config.with_overrides({"schedule": {"iterations": max(0, args.iterations)}})
    except (ValueError, KeyError) as exc:
        raise SystemExit(f"Unable to balance teams: {exc}") from exc

    if args.save_profile:
        BalancerProfile(roster_mapping, profile.overrides).save(args.save_profile)
        print(f"Saved balancer profile to {args.save_profile}")

    try:
        records = load_records_from_csv(args.roster, mapping=roster_mapping or None)
        assignment = assign_teams(records, config=config, seed=args.seed, match_format=args.match_format)
    except (TeamBalancingError, ValueError, KeyError) as exc:
        raise SystemExit(f"Unable to balance teams: {exc}") from exc

    lookup = {record.player_id: record for record in records}
    model = AttributeModel(config.score_weights)

    if args.json:
        print(json.dumps(_assignment_payload(assignment), indent=2))
    else:
        print(f"BALANCED TEAMS (imbalance {assignment.imbalance:.3f}, seed split {assignment.initial_imbalance:.3f})")
        print("")
        _print_team("TEAM A", assignment.team_a, lookup, model)
        _print_team("TEAM B", assignment.team_b, lookup, model)

    if args.output:
        with args.output.open("w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(["team", "player_id", "name", "position", "composite_score"])
            for team, ids in (("A", assignment.team_a), ("B", assignment.team_b)):
                for pid in ids:
                    player = lookup[pid]
                    writer.writerow([
                        team,
                        pid,
                        player.name,
                        model.position_of(player).value,
                        f"{model.composite_score(player):.3f}",
                    ])
        print(f"Wrote assignment to {args.output}")


if __name__ == "__main__":
    main()
