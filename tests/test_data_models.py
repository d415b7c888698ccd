"""Tests for data_models.py - player physics, flaps and obstacle collisions."""
import pytest

from flappy.constants import PLAYER_START_X, PLAYER_START_Y
from flappy.data_models import AlreadyDead, FallingTooFast, Obstacle, Player, PlayerError


@pytest.mark.unit
class TestPlayerAdvance:

    def test_first_tick_from_rest(self):
        player = Player()

        assert player.advance() is True
        assert player.velocity == pytest.approx(0.2)
        assert player.position == (PLAYER_START_X + 1, PLAYER_START_Y)

    def test_gravity_accumulates_below_cap(self):
        player = Player(velocity=1.9)

        player.advance()

        assert player.velocity == pytest.approx(2.1)
        assert player.y == PLAYER_START_Y + 2

    def test_velocity_at_or_above_cap_is_not_increased(self):
        at_cap = Player(velocity=2.0)
        above_cap = Player(velocity=3.0)

        at_cap.advance()
        above_cap.advance()

        assert at_cap.velocity == 2.0
        assert above_cap.velocity == 3.0
        assert above_cap.y == PLAYER_START_Y + 3

    def test_advance_never_lowers_velocity(self):
        player = Player(velocity=-2.0)
        for _ in range(30):
            before = player.velocity
            player.advance()
            assert player.velocity >= before

    def test_vertical_move_truncates_toward_zero(self):
        player = Player(velocity=-1.0)

        player.advance()

        # -0.8 truncates to 0, not -1
        assert player.velocity == pytest.approx(-0.8)
        assert player.y == PLAYER_START_Y

    def test_upward_move(self):
        player = Player(velocity=-2.0)

        player.advance()

        assert player.y == PLAYER_START_Y - 1

    def test_crossing_the_top_kills_and_clamps(self):
        player = Player(x=10, y=0, velocity=-2.0)

        assert player.advance() is False
        assert player.y == 0
        assert player.alive is False
        assert player.x == 11

    def test_advance_on_dead_player_is_noop(self):
        player = Player(x=10, y=0, velocity=-2.0)
        player.advance()

        assert player.advance() is False
        assert player.position == (11, 0)
        assert player.velocity == pytest.approx(-1.8)


@pytest.mark.unit
class TestPlayerImpulse:

    @pytest.mark.parametrize("velocity", [-2.0, 0.0, 2.0, 4.9, 5.0])
    def test_impulse_sets_absolute_velocity(self, velocity):
        player = Player(velocity=velocity)

        player.impulse()

        assert player.velocity == -2.0

    def test_impulse_when_falling_too_fast(self):
        player = Player(velocity=5.5)

        with pytest.raises(FallingTooFast):
            player.impulse()

        assert player.velocity == 5.5
        assert player.position == (PLAYER_START_X, PLAYER_START_Y)
        assert player.alive

    def test_impulse_on_dead_player(self):
        player = Player(velocity=1.0)
        player.kill()

        with pytest.raises(AlreadyDead):
            player.impulse()

        assert player.velocity == 1.0
        assert player.position == (PLAYER_START_X, PLAYER_START_Y)

    def test_dead_check_comes_first(self):
        player = Player(velocity=9.0, alive=False)

        with pytest.raises(AlreadyDead):
            player.impulse()

    def test_errors_share_a_base_class(self):
        assert issubclass(AlreadyDead, PlayerError)
        assert issubclass(FallingTooFast, PlayerError)
        assert str(AlreadyDead()) == "Player is already dead"
        assert str(FallingTooFast()) == "Can't flap while falling too fast"


@pytest.mark.unit
class TestPlayerLifecycle:

    def test_kill_and_reset(self):
        player = Player(x=40, y=12, velocity=1.4)
        player.kill()
        assert not player.is_alive

        player.reset(5, 25)

        assert player.position == (5, 25)
        assert player.velocity == 0.0
        assert player.is_alive


@pytest.mark.unit
class TestObstacle:

    @pytest.fixture
    def obstacle(self):
        return Obstacle(x=5, gap_y=25, size=10)

    def test_player_above_gap_collides(self, obstacle):
        assert obstacle.hits(Player(x=5, y=10))

    def test_player_inside_gap_passes(self, obstacle):
        assert not obstacle.hits(Player(x=5, y=25))

    def test_other_column_never_collides(self, obstacle):
        assert not obstacle.hits(Player(x=6, y=10))
        assert not obstacle.hits(Player(x=4, y=49))

    @pytest.mark.parametrize("y, hit", [(19, True), (20, False), (30, False), (31, True)])
    def test_gap_band_is_inclusive(self, obstacle, y, hit):
        assert obstacle.hits(Player(x=5, y=y)) is hit

    def test_odd_size_rounds_half_down(self):
        obstacle = Obstacle(x=0, gap_y=20, size=11)

        assert obstacle.half_size == 5
        assert not obstacle.hits(Player(x=0, y=15))
        assert obstacle.hits(Player(x=0, y=14))

    def test_wall_rows(self, obstacle):
        top, bottom = obstacle.wall_rows()

        assert top == range(0, 20)
        assert bottom == range(30, 50)

    @pytest.mark.parametrize("size", [0, -4])
    def test_gap_size_must_be_positive(self, size):
        with pytest.raises(ValueError):
            Obstacle(x=0, gap_y=20, size=size)
