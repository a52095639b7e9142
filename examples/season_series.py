"""Print a league's cumulative points per round and enter results for the next race."""

import sys

from raceledger import LeagueClient, chart_rows
from raceledger.exceptions import OperationFailedError, ResultsValidationError
from raceledger.services import load_season_series, open_results_editor, save_results


def main(league_id: str) -> None:
    with LeagueClient() as api:
        print("=== Driver points by round ===")
        for row in chart_rows(load_season_series(api, league_id)):
            label = row.pop("round")
            leaders = ", ".join(f"{name} {pts:g}" for name, pts in row.items())
            print(f"  {label}: {leaders}")

        print("\n=== Team points by round ===")
        for series in load_season_series(api, league_id, mode="teams"):
            print(f"  {series.name}: {series.totals}")

        upcoming = [m for m in api.matches(league_id) if m.status != "completed"]
        if not upcoming:
            return

        match = upcoming[0]
        editor = open_results_editor(api, match)
        print(f"\n=== Entering results for R{match.round} {match.track} ===")
        for position, driver in enumerate(editor.participants, start=1):
            row = editor.add_row()
            editor.set_field(row.row_id, "participant_id", driver.id)
            editor.set_field(row.row_id, "position", position)
            print(f"  P{position} {driver.user_nickname}: {editor.get_row(row.row_id).points} pts")

        try:
            save_results(api, editor)
        except ResultsValidationError as exc:
            print(f"  Not saved: {exc}")
        except OperationFailedError:
            print("  Save failed, rows kept for retry.")


if __name__ == "__main__":
    main(sys.argv[1] if len(sys.argv) > 1 else "league-1")
