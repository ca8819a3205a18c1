"""JSON formatter for ownership reports."""

import json
from typing import Any

from ..ownership import OwnershipShare, OwnershipStatistics
from .base import BaseFormatter

NO_TEAM_KEY = "(No team)"


def _share_dict(share: OwnershipShare) -> dict[str, Any]:
    return {
        "total_lines_owned": share.total_lines_owned,
        "percent_owned": round(share.percent_owned, 4),
    }


class JsonFormatter(BaseFormatter):
    """Render ownership as a JSON object keyed by person and team name."""

    def render(self, statistics: OwnershipStatistics) -> None:
        print(self.format(statistics))

    def format(self, statistics: OwnershipStatistics) -> str:
        data = {
            "total_lines": statistics.total_lines(),
            "people": {
                person.name: _share_dict(share) for person, share in statistics.people_toplist()
            },
            "teams": {
                (team if team is not None else NO_TEAM_KEY): _share_dict(share)
                for team, share in statistics.teams_toplist()
            },
        }
        return json.dumps(data, indent=2)
