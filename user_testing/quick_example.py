#!/usr/bin/env python3
"""
Quick Takedown Example - Build, Save and Reload a Team
======================================================

This is the simplest way to use Takedown to manage a team roster.
"""
import os
import sys
import tempfile
from datetime import date

# Add backend source to path
ROOT = os.path.join(os.path.dirname(__file__), '..')
sys.path.insert(0, os.path.join(ROOT, 'backend', 'src'))
sys.path.insert(0, os.path.join(ROOT, 'backend'))

from domain.models import Coach, CoachType, Gender, MemberKind, Wrestler
from domain.services import RosterService


def quick_roster_example(directory: str):
    """Simple example: create a team, fill it, save it, load it back."""
    print("🤼 Takedown Quick Example - Team Roster\n")

    service = RosterService.from_settings()
    team = service.create_team("Eagles", directory)

    service.add_member(team, MemberKind.COACH, Coach(
        first_name="Dan", last_name="Gable", gender=Gender.MALE,
        school="Central", years_of_experience=30, coach_type=CoachType.HANDS_ON
    ))
    service.add_member(team, MemberKind.WRESTLER, Wrestler(
        first_name="Ada", last_name="Lopez", gender=Gender.FEMALE, school="Central",
        years_of_experience=3, birthdate=date(2008, 3, 14), weight=118.4,
        wins=12, losses=4, wins_by_pin=5, total_points=96
    ))
    service.add_member(team, MemberKind.WRESTLER, Wrestler(
        first_name="Ben", last_name="Ortiz", gender=Gender.MALE, school="Central",
        years_of_experience=2, birthdate=date(2009, 7, 2), weight=151.0,
        wins=8, losses=8, wins_by_pin=2, total_points=70
    ))

    path = service.save_team(team)
    print(f"✅ Saved {team.total_members} members to {path}\n")

    result = service.load_team(path)
    print(f"📂 {result.summary()}\n")

    for kind in MemberKind:
        headers, rows = service.roster_table(result.team, kind)
        print(f"📋 {kind.plural}:")
        print("-" * 50)
        print(" | ".join(headers))
        for row in rows:
            print(" | ".join(row))
        print()

    statistics = service.team_statistics(result.team)
    print(f"🏆 Win percentage: {statistics.win_percentage:.1f}%")
    print(f"📌 Pins: {statistics.total_pin_count}")
    for entry in statistics.weight_category_breakdown:
        if entry.all_count:
            print(f"   {entry.weight_category:g}: {entry.male_count} male, {entry.female_count} female")


if __name__ == "__main__":
    with tempfile.TemporaryDirectory() as workdir:
        quick_roster_example(workdir)
