"""
Flight log and reporting helpers.

Responsibilities:
- Per-episode touchdown records
- Rolling landing rate over the last EP_N episodes
- Export to CSV/JSON at exit
"""
from __future__ import annotations

import csv
import json
from collections import deque
from dataclasses import asdict, dataclass
from datetime import datetime
from pathlib import Path
from typing import Deque, Dict, List, Optional

from . import config as C


@dataclass
class EpisodeRecord:
    episode: int
    level: int
    difficulty: int
    steps: int
    outcome: str
    fail_reason: Optional[str]
    x: float
    y: float
    vx: float
    vy: float
    angle: float
    touchdown_vy: float
    pad_count: int
    pad_width: float
    dist_to_pad_center: float
    wall_time_sec_episode: float
    rolling_landing_rate: float


class FlightLog:
    """Capture one record per finished episode and export them as CSV/JSON."""

    def __init__(self, run_name: Optional[str] = None, run_tag: str = C.RUN_TAG) -> None:
        self.run_name = run_name or f"run_{datetime.now().strftime('%Y%m%d_%H%M%S')}"
        self.run_tag = run_tag
        self.records: List[EpisodeRecord] = []
        self._landed_window: Deque[bool] = deque(maxlen=C.EP_N)

    def record_episode(
        self,
        episode: int,
        *,
        lander,
        terrain,
        level: int,
        difficulty: int,
        steps: int,
        touchdown_vy: float,
        wall_time_sec_episode: float,
    ) -> EpisodeRecord:
        """Record a finished episode. touchdown_vy is the vertical speed just before contact."""
        landed = bool(lander.landed)
        self._landed_window.append(landed)

        nearest = terrain.nearest_pad(lander.x)
        dist_to_pad_center = lander.x - nearest.center if nearest else 0.0

        record = EpisodeRecord(
            episode=episode,
            level=level,
            difficulty=difficulty,
            steps=steps,
            outcome="landed" if landed else "crashed",
            fail_reason=lander.fail_reason,
            x=lander.x,
            y=lander.y,
            vx=lander.vx,
            vy=lander.vy,
            angle=lander.angle,
            touchdown_vy=touchdown_vy,
            pad_count=len(terrain.pads),
            pad_width=terrain.pads[0].width if terrain.pads else 0.0,
            dist_to_pad_center=dist_to_pad_center,
            wall_time_sec_episode=wall_time_sec_episode,
            rolling_landing_rate=self._mean_bool(self._landed_window),
        )
        self.records.append(record)
        return record

    def export_csv(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=list(asdict(self.records[0]).keys()))
            writer.writeheader()
            for rec in self.records:
                writer.writerow(asdict(rec))

    def export_json(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        payload: Dict[str, object] = {
            "run_name": self.run_name,
            "run_tag": self.run_tag,
            "episodes": [asdict(r) for r in self.records],
            "episode_count": len(self.records),
            "landings": sum(1 for r in self.records if r.outcome == "landed"),
            "created_at": datetime.now().isoformat(),
        }
        with path.open("w") as f:
            json.dump(payload, f, indent=2)

    def finalize_and_export(
        self,
        *,
        out_dir: Path = C.REPORTS_DIR,
        export_csv: bool = C.EXPORT_CSV,
        export_json: bool = C.EXPORT_JSON,
    ) -> List[Path]:
        if not self.records:
            return []

        out_dir = Path(out_dir)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        base_name = f"{self.run_name}_{timestamp}"
        written = []
        if export_csv:
            path = out_dir / f"{base_name}.csv"
            self.export_csv(path)
            written.append(path)
        if export_json:
            path = out_dir / f"{base_name}.json"
            self.export_json(path)
            written.append(path)
        return written

    @staticmethod
    def _mean_bool(values: Deque[bool]) -> float:
        if not values:
            return 0.0
        return sum(values) / len(values)
