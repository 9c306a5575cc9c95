"""Shared pytest fixtures for Neon Pong tests."""
import copy
import os

# Headless pygame for skin and input source tests
os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')

import pytest

from neon_pong import Simulation, SimulationConfig
from neon_pong import logging as pong_logging


@pytest.fixture
def config():
    """Default settings with a fixed seed."""
    return SimulationConfig(seed=1234)


@pytest.fixture
def sim(config):
    """Idle simulation."""
    return Simulation(config)


@pytest.fixture
def running_sim(sim):
    """Simulation with the first ball served."""
    sim.start()
    return sim


@pytest.fixture
def restore_logging():
    """Restore global logging configuration and sinks after a test."""
    saved = copy.deepcopy(pong_logging._config)
    yield pong_logging._config
    pong_logging.close_all_sinks()
    pong_logging._config.clear()
    pong_logging._config.update(saved)


def place_ball(sim, x, y, vx=0.0, vy=0.0):
    """Put the simulation's ball at a position with a velocity."""
    sim._ball.x = x
    sim._ball.y = y
    sim._ball.set_velocity(vx, vy)
