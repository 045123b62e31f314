"""Watches the philosophers for starvation or completed meals."""

import time


def check_once(table):
    """Inspect every philosopher once; return True if the simulation ended.

    A philosopher who has gone ``die_dur`` milliseconds without eating is
    announced dead. When a meal limit is set and every philosopher has
    reached it, the simulation stops silently.
    """
    settings = table.settings
    all_eaten = 0
    for philo in table.philosophers:
        with philo.meal_lock:
            if table.clock.now() - philo.last_meal >= settings.die_dur:
                table.announce_death(philo.id)
                return True
            if settings.max_meals is not None and philo.meal_count >= settings.max_meals:
                all_eaten += 1
                if all_eaten == settings.philo_num:
                    table.stop()
                    return True
    return False


def death_monitor(table):
    """Body of the monitor thread; returns once the simulation ends."""
    if not table.wait_for_start():
        return
    while not check_once(table):
        time.sleep(0.0001)