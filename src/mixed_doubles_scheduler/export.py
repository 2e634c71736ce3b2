"""Export schedule to various formats."""

from collections import defaultdict

from .models import Schedule


def schedule_to_tsv(schedule: Schedule) -> str:
    """
    Export schedule to TSV format for spreadsheet import.

    Format:
    - One row per round
    - One column per court, each game written as "M1/W2 v M3/W4"
    - A final Byes column listing everyone sitting the round out

    Courts left empty in a round (usually the last one) are blank cells.
    """
    lines: list[str] = []

    header = ["Round"] + [f"Court {c}" for c in range(1, schedule.courts + 1)] + ["Byes"]
    lines.append("\t".join(header))

    for r in schedule.rounds:
        cells = [str(game) for game in r.games]
        cells += [""] * (schedule.courts - len(cells))
        byes = ", ".join(p.name for p in r.byes)
        lines.append("\t".join([str(r.number)] + cells + [byes]))

    return "\n".join(lines)


def export_schedule_tsv(schedule: Schedule, filepath: str) -> None:
    """Export schedule to a TSV file."""
    tsv_content = schedule_to_tsv(schedule)
    with open(filepath, "w") as f:
        f.write(tsv_content)


def sightings_table_to_tsv(schedule: Schedule) -> str:
    """
    Generate a two-way table showing how often each pair of players met.

    Each cell shows X/Y where:
    - X = number of times they were teammates
    - Y = number of times they were opponents

    In a valid schedule no cell goes above 1/1.
    """
    teammate_count: dict[tuple[int, int], int] = defaultdict(int)
    opponent_count: dict[tuple[int, int], int] = defaultdict(int)

    for game in schedule.games:
        for team in (game.team1, game.team2):
            pair = (min(team.man.id, team.woman.id), max(team.man.id, team.woman.id))
            teammate_count[pair] += 1

        for c1 in game.team1.players:
            for c2 in game.team2.players:
                pair = (min(c1.id, c2.id), max(c1.id, c2.id))
                opponent_count[pair] += 1

    lines: list[str] = []

    header = [""] + [p.name for p in schedule.players]
    lines.append("\t".join(header))

    for p1 in schedule.players:
        row = [p1.name]
        for p2 in schedule.players:
            if p1 == p2:
                row.append("-")
            else:
                pair = (min(p1.id, p2.id), max(p1.id, p2.id))
                row.append(f"{teammate_count[pair]}/{opponent_count[pair]}")
        lines.append("\t".join(row))

    return "\n".join(lines)


def export_sightings_table(schedule: Schedule, filepath: str) -> None:
    """Export sightings table to a TSV file."""
    tsv_content = sightings_table_to_tsv(schedule)
    with open(filepath, "w") as f:
        f.write(tsv_content)
