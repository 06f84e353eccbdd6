import pytest

from src.timeclock.timeclock.core.enums import PunchStatus
from src.timeclock.timeclock.reconciliation.classifier import classify
from src.timeclock.timeclock.reconciliation.factory import StatusStrategyFactory
from src.timeclock.timeclock.reconciliation.punch_extractor import EMPTY_PUNCH, PunchTime
from src.timeclock.timeclock.reconciliation.strategies.absent_strategy import AbsentStrategy
from src.timeclock.timeclock.reconciliation.strategies.adjusted_strategy import AdjustedStrategy
from src.timeclock.timeclock.reconciliation.strategies.early_strategy import ForcedEarlyStrategy
from src.timeclock.timeclock.reconciliation.strategies.tolerance_strategy import ToleranceStrategy


def _at(minutes_after_eight: int, adjusted: bool = False) -> PunchTime:
    total = 8 * 60 + minutes_after_eight
    return PunchTime(time=f"{total // 60:02d}:{total % 60:02d}", adjusted=adjusted)


@pytest.mark.parametrize("tolerance", [0, 5, 15])
def test_tolerance_boundaries_are_inclusive(tolerance):
    assert classify("08:00", _at(tolerance), tolerance) == PunchStatus.ON_TIME
    assert classify("08:00", _at(-tolerance), tolerance) == PunchStatus.ON_TIME
    assert classify("08:00", _at(tolerance + 1), tolerance) == PunchStatus.LATE
    assert classify("08:00", _at(-(tolerance + 1)), tolerance) == PunchStatus.EARLY


@pytest.mark.parametrize("offset", [-120, -6, 0, 6, 120])
def test_adjustment_marker_dominates(offset):
    assert classify("08:00", _at(offset, adjusted=True), 5) == PunchStatus.ADJUSTED


def test_missing_actual_gives_no_status():
    assert classify("08:00", EMPTY_PUNCH, 5) is None


def test_missing_contractual_gives_no_status_unless_adjusted():
    assert classify(None, _at(0), 5) is None
    assert classify(None, _at(0, adjusted=True), 5) == PunchStatus.ADJUSTED


def test_forced_early_ignores_time_math():
    assert classify("17:00", PunchTime(time="18:30"), 5, forced_status=PunchStatus.EARLY) == PunchStatus.EARLY


def test_factory_picks_strategy():
    factory = StatusStrategyFactory()
    assert isinstance(factory.for_punch(contractual="08:00", actual=EMPTY_PUNCH), AbsentStrategy)
    assert isinstance(factory.for_punch(contractual="08:00", actual=_at(3, adjusted=True)), AdjustedStrategy)
    assert isinstance(factory.for_punch(contractual=None, actual=_at(3)), AbsentStrategy)
    assert isinstance(factory.for_punch(contractual="08:00", actual=_at(3)), ToleranceStrategy)
    assert isinstance(
        factory.for_punch(contractual="08:00", actual=_at(3), forced_status=PunchStatus.EARLY),
        ForcedEarlyStrategy,
    )


def test_tolerance_strategy_reports_difference():
    decision = ToleranceStrategy().decide(contractual="08:00", actual=_at(10), tolerance_minutes=5)
    assert decision.status == PunchStatus.LATE
    assert decision.diff_minutes == 10
