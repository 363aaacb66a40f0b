from __future__ import annotations

from falling_blocks_rl.game import FallingBlocksGame, GameConfig, TickDriver


def _started() -> tuple[FallingBlocksGame, TickDriver]:
    game = FallingBlocksGame(GameConfig(random_seed=3))
    game.start()
    driver = TickDriver(game)
    driver.restart()
    return game, driver


def test_first_frame_sets_baseline():
    game, driver = _started()
    assert driver.advance(50_000) == 0.0
    assert game.drop_counter == 0
    assert driver.advance(50_400) == 400
    assert game.drop_counter == 400


def test_gravity_fires_after_interval():
    game, driver = _started()
    driver.advance(0)
    driver.advance(700)
    assert game.current.y == 0
    driver.advance(1_001)
    assert game.current.y == 1
    assert game.drop_counter == 0


def test_no_spike_after_pause():
    game, driver = _started()
    driver.advance(1_000)
    driver.advance(1_500)
    game.toggle_pause()
    assert driver.advance(60_000) == 0.0
    game.toggle_pause()
    assert driver.advance(120_000) == 0.0
    assert driver.advance(120_100) == 100
    assert game.drop_counter == 600
    assert game.current.y == 0


def test_clock_going_backwards_is_clamped():
    game, driver = _started()
    driver.advance(5_000)
    assert driver.advance(4_000) == 0.0
    assert driver.advance(4_250) == 250
    assert game.drop_counter == 250


def test_restart_forgets_baseline():
    game, driver = _started()
    driver.advance(100)
    driver.advance(900)
    game.start()
    driver.restart()
    assert driver.advance(10_000) == 0.0
    assert game.drop_counter == 0
