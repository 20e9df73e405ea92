"""REST API for the pysquads team balancer."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from typing import Any

from fastapi import FastAPI, File, Form, HTTPException, UploadFile

from pysquads.api.schemas import (
    BalancerOptions,
    ImbalanceResponse,
    MatchFormatResponse,
    TeamAssignmentResponse,
    TeamRequest,
    TeamSummaryResponse,
)
from pysquads.balancer import TeamAssignment, assign_teams
from pysquads.config import BalancerConfig, iter_formats, load_balancer_config
from pysquads.ingest import parse_roster_text
from pysquads.models import PlayerRecord


logger = logging.getLogger(__name__)


def _options_to_overrides(options: BalancerOptions) -> dict[str, dict[str, Any]]:
    overrides: dict[str, dict[str, Any]] = {}
    schedule = {
        key: value
        for key, value in (
            ("iterations", options.iterations),
            ("initial_temperature", options.initial_temperature),
            ("final_temperature", options.final_temperature),
        )
        if value is not None
    }
    if schedule:
        overrides["schedule"] = schedule
    if options.tier_epsilon is not None:
        overrides["seeding"] = {"tier_epsilon": options.tier_epsilon}
    return overrides


def assignment_to_response(assignment: TeamAssignment) -> TeamAssignmentResponse:
    breakdown = assignment.breakdown
    return TeamAssignmentResponse(
        team_a=list(assignment.team_a),
        team_b=list(assignment.team_b),
        imbalance=assignment.imbalance,
        initial_imbalance=assignment.initial_imbalance,
        breakdown=ImbalanceResponse(
            score=breakdown.score,
            attributes=breakdown.attributes,
            positions=breakdown.positions,
            total=breakdown.total,
        ),
        summary_a=TeamSummaryResponse(**asdict(assignment.summary_a)),
        summary_b=TeamSummaryResponse(**asdict(assignment.summary_b)),
        iterations=assignment.iterations,
        seed=assignment.seed,
    )


def _parse_mapping(mapping_str: str | None) -> dict[str, str]:
    if not mapping_str:
        return {}
    try:
        data = json.loads(mapping_str)
    except json.JSONDecodeError as exc:
        raise HTTPException(status_code=400, detail=f"Invalid mapping JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise HTTPException(status_code=400, detail="Mapping must be a JSON object")
    return {str(key): str(value) for key, value in data.items()}


def create_app(config: BalancerConfig | None = None) -> FastAPI:
    app = FastAPI(title="pysquads balancer")
    base_config = config or load_balancer_config()
    app.state.balancer_config = base_config

    def run_assignment(
        players: list[PlayerRecord],
        *,
        options: BalancerOptions,
        seed: int | None,
        match_format: str | None,
    ) -> TeamAssignmentResponse:
        try:
            request_config = base_config.with_overrides(_options_to_overrides(options))
            assignment = assign_teams(
                players,
                config=request_config,
                seed=seed,
                match_format=match_format,
            )
        except KeyError as exc:
            raise HTTPException(status_code=400, detail=str(exc.args[0])) from exc
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return assignment_to_response(assignment)

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/formats", response_model=list[MatchFormatResponse])
    async def formats() -> list[MatchFormatResponse]:
        return [
            MatchFormatResponse(key=fmt.key, label=fmt.label, players=fmt.players, team_size=fmt.team_size)
            for fmt in iter_formats()
        ]

    @app.post("/teams", response_model=TeamAssignmentResponse)
    async def teams(request: TeamRequest) -> TeamAssignmentResponse:
        return run_assignment(
            list(request.players),
            options=request.options,
            seed=request.seed,
            match_format=request.format,
        )

    @app.post("/teams/csv", response_model=TeamAssignmentResponse)
    async def teams_from_csv(
        roster: UploadFile = File(...),
        roster_mapping: str | None = Form(None),
        match_format: str | None = Form(None, alias="format"),
        seed: int | None = Form(None),
        iterations: int | None = Form(None),
    ) -> TeamAssignmentResponse:
        contents = await roster.read()
        if not contents:
            raise HTTPException(status_code=400, detail="roster file is empty")
        try:
            text = contents.decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise HTTPException(status_code=400, detail="roster file must be UTF-8 text") from exc
        mapping = _parse_mapping(roster_mapping)
        try:
            players = parse_roster_text(text, mapping=mapping or None)
            options = BalancerOptions(iterations=iterations)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        logger.info("Parsed %s players from %s", len(players), roster.filename)
        return run_assignment(players, options=options, seed=seed, match_format=match_format)

    return app
