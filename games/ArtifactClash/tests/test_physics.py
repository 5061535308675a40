"""
Tests for Artifact Clash physics and collision helpers.
"""

import pytest

from models import Vector2D
from models.arena import ArtifactType, Team
from games.ArtifactClash.game.entities import Artifact, Robot
from games.ArtifactClash.game.entities.robot import DEFAULT_CONTROLS
from games.ArtifactClash.game.physics import (
    bounce_off_walls,
    check_goal,
    clamp,
    clamp_to_field,
    desired_direction,
    in_intake_range,
    push_from_robots,
)
from games.ArtifactClash.game.state import GOALS


def artifact_at(x, y, vx=0.0, vy=0.0):
    artifact = Artifact(ArtifactType.PURPLE, Vector2D(x=x, y=y))
    artifact.velocity = Vector2D(x=vx, y=vy)
    return artifact


def robot_at(team, x, y):
    robot = Robot.at_start(team)
    robot.position = Vector2D(x=x, y=y)
    return robot


class TestDesiredDirection:
    """Test steering input."""

    def test_no_keys_is_zero(self):
        assert desired_direction({}, DEFAULT_CONTROLS[Team.RED]) == Vector2D.zero()

    def test_single_key(self):
        direction = desired_direction({'down': True}, DEFAULT_CONTROLS[Team.BLUE])
        assert direction == Vector2D(x=0.0, y=1.0)

    def test_diagonal_is_unit_length(self):
        direction = desired_direction({'a': True, 's': True}, DEFAULT_CONTROLS[Team.RED])
        assert direction.magnitude() == pytest.approx(1.0)
        assert direction.x < 0 and direction.y > 0

    def test_opposites_cancel(self):
        keys = {'w': True, 's': True, 'a': True, 'd': True}
        assert desired_direction(keys, DEFAULT_CONTROLS[Team.RED]) == Vector2D.zero()


class TestClamp:
    """Test value and field clamping."""

    def test_clamp(self):
        assert clamp(-5, 0, 10) == 0
        assert clamp(15, 0, 10) == 10
        assert clamp(5, 0, 10) == 5

    def test_inside_point_unchanged(self):
        point = Vector2D(x=500.0, y=500.0)
        assert clamp_to_field(point, 20.0, 2000, 1400) is point

    def test_outside_point_pulled_in(self):
        point = Vector2D(x=2100.0, y=-50.0)
        assert clamp_to_field(point, 20.0, 2000, 1400) == Vector2D(x=1980.0, y=20.0)


class TestWallBounce:
    """Test artifact reflection off the field walls."""

    def test_left_wall_flips_x(self):
        """Past the left margin the x velocity reverses, y is untouched."""
        artifact = artifact_at(5.0, 500.0, vx=-3.0, vy=1.0)
        bounce_off_walls(artifact)
        assert artifact.velocity == Vector2D(x=3.0, y=1.0)

    def test_bottom_wall_flips_y(self):
        artifact = artifact_at(500.0, 1395.0, vx=2.0, vy=4.0)
        bounce_off_walls(artifact)
        assert artifact.velocity == Vector2D(x=2.0, y=-4.0)

    def test_position_is_not_corrected(self):
        """Bounce only reflects velocity; the artifact may sit past the wall."""
        artifact = artifact_at(1996.0, 500.0, vx=5.0)
        bounce_off_walls(artifact)
        assert artifact.position.x == 1996.0
        assert artifact.velocity.x == -5.0

    def test_inside_field_untouched(self):
        artifact = artifact_at(500.0, 500.0, vx=5.0, vy=-5.0)
        bounce_off_walls(artifact)
        assert artifact.velocity == Vector2D(x=5.0, y=-5.0)


class TestRobotPush:
    """Test robots shoving overlapping artifacts."""

    def test_overlap_pushes_away_from_robot(self):
        """An artifact 10 units right of a robot gains (+2, 0)."""
        artifact = artifact_at(110.0, 100.0)
        pushes = push_from_robots(artifact, [robot_at(Team.RED, 100.0, 100.0)])
        assert pushes == 1
        assert artifact.velocity.x == pytest.approx(2.0)
        assert artifact.velocity.y == pytest.approx(0.0)

    def test_push_accumulates_from_both_robots(self):
        """Each overlapping robot adds its own impulse."""
        artifact = artifact_at(500.0, 500.0)
        robots = [robot_at(Team.RED, 490.0, 500.0), robot_at(Team.BLUE, 500.0, 490.0)]
        assert push_from_robots(artifact, robots) == 2
        assert artifact.velocity.x == pytest.approx(2.0)
        assert artifact.velocity.y == pytest.approx(2.0)

    def test_no_push_at_contact_distance(self):
        """Exactly 28 units apart is not an overlap."""
        artifact = artifact_at(128.0, 100.0)
        assert push_from_robots(artifact, [robot_at(Team.RED, 100.0, 100.0)]) == 0
        assert artifact.velocity == Vector2D.zero()


class TestIntakeRange:
    """Test the 60-unit intake reach."""

    def test_inside_reach(self):
        assert in_intake_range(robot_at(Team.RED, 0.0, 0.0), artifact_at(59.0, 0.0))

    def test_at_reach_is_out(self):
        assert not in_intake_range(robot_at(Team.RED, 0.0, 0.0), artifact_at(60.0, 0.0))


class TestGoals:
    """Test goal detection."""

    def test_goal_centres(self):
        assert GOALS[Team.RED] == Vector2D(x=50.0, y=700.0)
        assert GOALS[Team.BLUE] == Vector2D(x=1950.0, y=700.0)

    def test_red_goal(self):
        assert check_goal(artifact_at(169.0, 700.0), GOALS) == Team.RED

    def test_blue_goal(self):
        assert check_goal(artifact_at(1950.0, 600.0), GOALS) == Team.BLUE

    def test_goal_edge_is_outside(self):
        """Exactly on the 120 radius does not score."""
        assert check_goal(artifact_at(170.0, 700.0), GOALS) is None

    def test_midfield(self):
        assert check_goal(artifact_at(1000.0, 700.0), GOALS) is None

    def test_red_checked_first(self):
        """When goals overlap, red wins the tie."""
        goals = {Team.RED: Vector2D(x=0.0, y=0.0), Team.BLUE: Vector2D(x=10.0, y=0.0)}
        assert check_goal(artifact_at(5.0, 0.0), goals) == Team.RED
