from rosterapi.db.session import SessionLocal
from rosterapi.db.init_db import init_db
from rosterapi.crud.crud_player import PlayerRepository
from rosterapi.crud.crud_team import TeamRepository
from rosterapi.models.players import Player
from rosterapi.models.teams import Team

TEAMS = [
    Team(team_name="Cowboys", wins=10, losses=6, is_current_champion=False),
    Team(team_name="Eagles", wins=14, losses=3, is_current_champion=True),
    Team(team_name="Giants", wins=3, losses=14, is_current_champion=False),
    Team(team_name="Commanders", wins=12, losses=5, is_current_champion=False),
]

# player name -> (position, team name)
PLAYERS = {
    "Dak-Prescott": ("Quarterback", "Cowboys"),
    "CeeDee-Lamb": ("Wide Receiver", "Cowboys"),
    "Jalen-Hurts": ("Quarterback", "Eagles"),
    "Saquon-Barkley": ("Running Back", "Eagles"),
    "Malik-Nabers": ("Wide Receiver", "Giants"),
    "Jayden-Daniels": ("Quarterback", "Commanders"),
}


def run():
    init_db()
    db = SessionLocal()
    teams = TeamRepository(db)
    players = PlayerRepository(db)

    # Do not seed twice
    existing = len(teams.find_all())
    if existing > 0:
        print(f"Teams already seeded. ({existing} rows)")
        db.close()
        return

    by_name = {}
    for t in TEAMS:
        by_name[t.team_name] = teams.save(t)

    for name, (position, team_name) in PLAYERS.items():
        players.save(Player(name=name, position=position, team_id=by_name[team_name].id))

    db.close()
    print(f"Seed OK ({len(TEAMS)} teams, {len(PLAYERS)} players)")


if __name__ == "__main__":
    run()
