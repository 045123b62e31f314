import io

from philosophers.clock import Clock
from philosophers.monitor import check_once, death_monitor
from philosophers.table import Settings, Table


class _ManualSource:
    def __init__(self, value=0):
        self.value = value

    def __call__(self):
        return self.value


def _table(settings, source):
    out = io.StringIO()
    return Table(settings, out=out, clock=Clock(time_source=source)), out


def test_nobody_dies_in_time():
    source = _ManualSource(100)
    table, out = _table(Settings(3, 800, 200, 200), source)
    assert check_once(table) is False
    assert not table.is_dead()
    assert out.getvalue() == ""


def test_starving_philosopher_dies():
    source = _ManualSource(100)
    table, out = _table(Settings(3, 800, 200, 200), source)
    for philo in table.philosophers:
        philo.last_meal = 100
    table.philosophers[1].last_meal = 0
    source.value = 850
    assert check_once(table) is True
    assert table.is_dead()
    assert out.getvalue() == "850 2 died\n"


def test_death_at_exact_limit():
    source = _ManualSource(800)
    table, out = _table(Settings(2, 800, 200, 200), source)
    assert check_once(table) is True
    assert out.getvalue().endswith(" 1 died\n")


def test_all_eaten_stops_silently():
    source = _ManualSource(10)
    table, out = _table(Settings(2, 800, 200, 200, max_meals=3), source)
    for philo in table.philosophers:
        philo.meal_count = 3
    assert check_once(table) is True
    assert table.is_dead()
    assert out.getvalue() == ""


def test_partial_eating_keeps_running():
    source = _ManualSource(10)
    table, _ = _table(Settings(2, 800, 200, 200, max_meals=3), source)
    table.philosophers[0].meal_count = 3
    table.philosophers[1].meal_count = 2
    assert check_once(table) is False
    assert not table.is_dead()


def test_without_meal_limit_meals_do_not_stop():
    source = _ManualSource(10)
    table, _ = _table(Settings(2, 800, 200, 200), source)
    for philo in table.philosophers:
        philo.meal_count = 1000
    assert check_once(table) is False


def test_monitor_returns_when_never_started():
    source = _ManualSource(5000)
    table, out = _table(Settings(2, 800, 200, 200), source)
    table.stop()
    death_monitor(table)
    assert out.getvalue() == ""


def test_monitor_reports_death_after_start():
    source = _ManualSource(1000)
    table, out = _table(Settings(2, 800, 200, 200), source)
    table.start()
    source.value = 1000 + 800
    death_monitor(table)
    assert table.is_dead()
    assert out.getvalue() == "800 1 died\n"