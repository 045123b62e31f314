"""What each philosopher thread does: take forks, eat, sleep and think."""

import time

from .table import State


def lock_forks(table, philo):
    """Take both forks, lower index first, announcing each one."""
    for index in sorted(philo.forks):
        table.forks[index].acquire()
        table.print_state(philo.id, table.clock.now(), "has taken a fork")


def unlock_forks(table, philo):
    """Put both forks down, higher index first."""
    for index in sorted(philo.forks, reverse=True):
        table.forks[index].release()


def eat(table, philo):
    """Eat one meal unless the simulation has ended."""
    if table.is_dead():
        return
    lock_forks(table, philo)
    try:
        table.print_state(philo.id, table.clock.now(), "is eating")
        with philo.meal_lock:
            philo.last_meal = table.clock.now()
            philo.meal_count += 1
        table.clock.sleep(table.settings.eat_dur)
    finally:
        unlock_forks(table, philo)


def sleep(table, philo):
    """Sleep for the configured duration unless the simulation has ended."""
    if table.is_dead():
        return
    table.print_state(philo.id, table.clock.now(), "is sleeping")
    table.clock.sleep(table.settings.sleep_dur)


def think(table, philo):
    """Announce thinking and yield briefly."""
    table.print_state(philo.id, table.clock.now(), "is thinking")
    time.sleep(0.000005)


_ROUTINES = {
    State.EAT: eat,
    State.SLEEP: sleep,
    State.THINK: think,
}


def choose_routine(table, philo):
    """Run the routine that matches the philosopher's current state."""
    _ROUTINES[philo.state](table, philo)


def _next_state(state):
    return State((state + 1) % len(State))


def _action_loop(table, philo):
    if philo.id % 2 == 0:
        philo.forks.reverse()
    while not table.is_dead():
        choose_routine(table, philo)
        philo.state = _next_state(philo.state)


def _lone_philosopher(table, philo):
    fork = table.forks[philo.forks[0]]
    with fork:
        table.print_state(philo.id, table.clock.now(), "has taken a fork")
    while not table.is_dead():
        table.clock.sleep(table.settings.sleep_dur)


def philosopher_routine(table, philo):
    """Body of a philosopher thread; returns once the simulation ends."""
    if philo.id % 2 == 0:
        time.sleep(0.01)
    if not table.wait_for_start():
        return
    with philo.meal_lock:
        philo.last_meal = table.clock.now()
    if table.settings.philo_num == 1:
        _lone_philosopher(table, philo)
    else:
        _action_loop(table, philo)