"""
Demo data seeder

Fills the configured database with registrations and matches spread over
the days before a given date, so the /daily and /stats reports return
something meaningful on a fresh install. Expects migrations to be applied.

Usage:
    python -m app.scripts.seed_demo_data --days 40 --players 200
"""

import argparse
import random
from datetime import UTC, datetime, timedelta

from app.analytics.game_types import ALLOWED_GAME_TYPES
from app.analytics.models.game_play import GamePlay, GamePlayParticipant
from app.analytics.models.player import Player
from app.db.session import SessionLocal


def _random_moment(rng: random.Random, day: datetime) -> datetime:
    return day + timedelta(seconds=rng.randrange(24 * 60 * 60))


def seed_demo_data(end: datetime, days: int, players: int, matches_per_day: int, seed: int) -> None:
    rng = random.Random(seed)
    first_day = end - timedelta(days=days - 1)

    db = SessionLocal()
    try:
        installs: dict[str, datetime] = {}
        for number in range(players):
            player_id = f"demo-player-{number:05d}"
            install_day = first_day + timedelta(days=rng.randrange(days))
            installs[player_id] = _random_moment(rng, install_day)
            db.add(Player(player_id=player_id, created_date=installs[player_id]))

        match_count = 0
        for offset in range(days):
            day = first_day + timedelta(days=offset)
            day_end = day + timedelta(days=1)
            installed = [pid for pid, installed_at in installs.items() if installed_at < day_end]
            if len(installed) < 2:
                continue

            for _ in range(matches_per_day):
                roster = rng.sample(installed, k=min(len(installed), rng.choice((1, 2, 2, 4))))
                game = GamePlay(
                    created_date=max(_random_moment(rng, day), *(installs[pid] for pid in roster)),
                    game_type=rng.choice(ALLOWED_GAME_TYPES),
                    game_won=rng.choice(roster) if rng.random() < 0.8 else None,
                )
                game.participants = [
                    GamePlayParticipant(player_id=pid, install_date=installs[pid]) for pid in roster
                ]
                db.add(game)
                match_count += 1

        db.commit()
        print(f"✓ Seeded {players} players and {match_count} matches")
        print(f"  From: {first_day:%Y-%m-%d}")
        print(f"  To:   {end:%Y-%m-%d}")
    except Exception as e:
        print(f"✗ Error seeding demo data: {e}")
        db.rollback()
        raise
    finally:
        db.close()


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed demo game analytics data")
    parser.add_argument("--end", help="Last seeded day, YYYY-MM-DD (default: today)")
    parser.add_argument("--days", type=int, default=40)
    parser.add_argument("--players", type=int, default=200)
    parser.add_argument("--matches-per-day", type=int, default=150)
    parser.add_argument("--seed", type=int, default=7)
    args = parser.parse_args()

    today = datetime.now(UTC).replace(hour=0, minute=0, second=0, microsecond=0)
    end = datetime.strptime(args.end, "%Y-%m-%d").replace(tzinfo=UTC) if args.end else today

    seed_demo_data(end, args.days, args.players, args.matches_per_day, args.seed)


if __name__ == "__main__":
    main()
