import pytest
from sqlalchemy.exc import IntegrityError
from sqlmodel import select

from app.db.models.habits import Habit, HabitLog
from app.db.repositories.habits import HabitRepository
from app.db.repositories.habit_logs import HabitLogRepository
from app.db.seed import load_seed_yaml, seed_all
from app.features.habits.services import (
    HabitService,
    HabitLogService,
    NotFoundError,
    ValidationError,
)


@pytest.fixture
def services(session):
    habit_svc = HabitService(repo=HabitRepository(session))
    log_svc = HabitLogService(repo=HabitLogRepository(session), habit_svc=habit_svc)
    return habit_svc, log_svc


def test_create_keeps_name_as_given(services):
    habit_svc, _ = services
    habit = habit_svc.create("  Yoga ")
    assert habit.name == "  Yoga "
    assert habit_svc.get(habit.id).name == "  Yoga "


def test_get_unknown_habit_raises(services):
    habit_svc, _ = services
    with pytest.raises(NotFoundError):
        habit_svc.get(123)


def test_toggle_checks_habit_before_payload(services):
    _, log_svc = services
    with pytest.raises(NotFoundError):
        log_svc.toggle(123, None)


@pytest.mark.parametrize("status", [None, "1", [1], True, float("nan"), 2**63, -(2**63) - 1, 10**20])
def test_toggle_rejects_bad_status(services, status):
    habit_svc, log_svc = services
    habit = habit_svc.create("Yoga")
    with pytest.raises(ValidationError):
        log_svc.toggle(habit.id, {"date": "2024-06-01", "status": status})


def test_unique_constraint_on_habit_and_date(session):
    habit = Habit(name="Yoga")
    session.add(habit)
    session.commit()
    session.add(HabitLog(habit_id=habit.id, date="2024-06-01", status=1))
    session.commit()

    session.add(HabitLog(habit_id=habit.id, date="2024-06-01", status=2))
    with pytest.raises(IntegrityError):
        session.commit()
    session.rollback()


def test_toggle_retries_as_update_when_insert_loses_the_race(session, services, monkeypatch):
    habit_svc, log_svc = services
    habit = habit_svc.create("Yoga")

    # Ligne insérée "par une autre requête" entre la lecture et l'écriture
    winner = HabitLog(habit_id=habit.id, date="2024-06-01", status=1)
    session.add(winner)
    session.commit()
    winner_id = winner.id

    original = HabitLogRepository.first_by_habit_and_date
    calls = {"n": 0}

    def first_call_misses(self, habit_id, date):
        calls["n"] += 1
        if calls["n"] == 1:
            return None
        return original(self, habit_id, date)

    monkeypatch.setattr(HabitLogRepository, "first_by_habit_and_date", first_call_misses)

    out = log_svc.toggle(habit.id, {"date": "2024-06-01", "status": 2})

    assert out.id == winner_id
    assert out.status == 2
    rows = session.exec(select(HabitLog)).all()
    assert len(rows) == 1


def test_toggle_twice_keeps_the_same_row(services):
    habit_svc, log_svc = services
    habit = habit_svc.create("Yoga")
    first = log_svc.toggle(habit.id, {"date": "2024-06-01", "status": 0})

    out = log_svc.toggle(habit.id, {"date": "2024-06-01", "status": 2})
    assert out.id == first.id
    assert out.status == 2


# -----------------------------
# Seed
# -----------------------------
SEED_YAML = """
habits:
  - name: Lire
    logs:
      - {date: "2024-06-01", status: 1}
      - {date: "2024-06-02", status: 0}
  - name: Méditer
"""


def test_seed_is_replayable(tmp_path, session, services):
    path = tmp_path / "seed.yaml"
    path.write_text(SEED_YAML, encoding="utf-8")

    first = seed_all(session, path)
    second = seed_all(session, path)

    assert first == {"habits": 2, "logs": 2}
    assert second == {"habits": 0, "logs": 2}
    assert len(session.exec(select(Habit)).all()) == 2
    assert len(session.exec(select(HabitLog)).all()) == 2

    _, log_svc = services
    lire = HabitRepository(session).get_by_name("Lire")
    assert [log.status for log in log_svc.list_for_month(lire.id, "2024-06")] == [1, 0]


def test_load_seed_yaml_rejects_non_mapping(tmp_path):
    path = tmp_path / "seed.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_seed_yaml(path)
    with pytest.raises(FileNotFoundError):
        load_seed_yaml(tmp_path / "missing.yaml")


# -----------------------------
# Ids, timestamps, écriture sans commit
# -----------------------------
@pytest.mark.parametrize("habit_id", ["abc", "", None, "99999999999999999999", 2**63, -(2**63) - 1])
def test_get_unreadable_or_out_of_range_id_is_not_found(services, habit_id):
    habit_svc, _ = services
    with pytest.raises(NotFoundError):
        habit_svc.get(habit_id)


def test_get_accepts_id_from_path_string(services):
    habit_svc, _ = services
    habit = habit_svc.create("Yoga")
    assert habit_svc.get(str(habit.id)).name == "Yoga"


def test_status_at_int64_bounds_is_stored(services):
    habit_svc, log_svc = services
    habit = habit_svc.create("Yoga")
    out = log_svc.toggle(habit.id, {"date": "2024-06-01", "status": 2**63 - 1})
    assert out.status == 2**63 - 1


def test_default_timestamps_are_timezone_aware(session):
    habit = Habit(name="Yoga")
    assert habit.created_at.tzinfo is not None
    assert habit.updated_at.tzinfo is not None

    session.add(habit)
    session.commit()
    log = HabitLogRepository(session).create(habit_id=habit.id, date="2024-06-01", status=1)
    assert log.id is not None


def test_create_without_commit_is_undone_by_rollback(session):
    habit = Habit(name="Yoga")
    session.add(habit)
    session.commit()

    repo = HabitLogRepository(session)
    pending = repo.create(habit_id=habit.id, date="2024-06-01", status=1, commit=False)
    assert pending.id is not None
    repo.rollback()

    assert repo.find_by_habit_and_date(habit.id, "2024-06-01") == []
