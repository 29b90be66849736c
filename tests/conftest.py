"""Shared fixtures for tests."""

from pathlib import Path

import pytest

from flowline.graph import ChartNode
from flowline.machine.transitions import TransitionGraph
from flowline.schema.loader import parse_machine_from_string


@pytest.fixture
def examples_dir() -> Path:
    """Return the path to the examples directory."""
    return Path(__file__).parent.parent / "examples"


@pytest.fixture
def start_node() -> ChartNode:
    return ChartNode("A").text("Start")


@pytest.fixture
def end_node() -> ChartNode:
    return ChartNode("B").text("End")


@pytest.fixture
def minimal_machine_yaml() -> str:
    """Return a minimal valid machine YAML string."""
    return """
id: Minimal
initial: Start
states:
  Start:
    on:
      GO: Finish
  Finish:
    type: final
"""


@pytest.fixture
def branching_machine_yaml() -> str:
    """Return a machine with tags, descriptions and a cycle."""
    return """
id: Heist
tags:
  - link:thick
  - curve:basis
initial: Plan
states:
  Plan:
    tags: Introduction
    description: Plan the job
    on:
      CASE:
        target: Scout
        description: Case the vault
      RUSH: Break In
  Scout:
    tags: Core
    on:
      BACK: Plan
      GO: Break In
  Break In:
    type: final
"""


@pytest.fixture
def minimal_machine(minimal_machine_yaml):
    """Return a parsed minimal machine."""
    return parse_machine_from_string(minimal_machine_yaml)


@pytest.fixture
def branching_machine(branching_machine_yaml):
    """Return a parsed branching machine."""
    return parse_machine_from_string(branching_machine_yaml)


@pytest.fixture
def minimal_graph(minimal_machine):
    """Return the transition graph of the minimal machine."""
    return TransitionGraph.from_machine(minimal_machine)
