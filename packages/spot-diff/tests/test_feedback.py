"""Tests for FeedbackChannel."""
import pytest

from spot_diff import (
    Clock,
    FeedbackChannel,
    FeedbackKind,
    FeedbackState,
    GameConfig,
    Hit,
    Miss,
)

TICKS = GameConfig().feedback_ticks


@pytest.fixture
def channel():
    return FeedbackChannel(Clock(tps=20), GameConfig())


def _advance(channel, n):
    for _ in range(n):
        channel.advance()


class TestFeedbackMessages:

    def test_starts_idle(self, channel):
        assert channel.state is FeedbackState.IDLE
        assert channel.message is None
        assert channel.expiry is None

    def test_hit_message(self, channel):
        message = channel.report(Hit(target_id=0, distance=3.0))
        assert message.kind is FeedbackKind.HIT
        assert message.text == GameConfig().hit_text
        assert channel.message is message
        assert channel.state is FeedbackState.ACTIVE

    def test_miss_message(self, channel):
        message = channel.report(Miss())
        assert message.kind is FeedbackKind.MISS
        assert message.text == GameConfig().miss_text

    def test_completing_hit_is_win(self, channel):
        message = channel.report(Hit(target_id=0, distance=0.0), completed=True)
        assert message.kind is FeedbackKind.WIN
        assert message.text == GameConfig().win_text

    def test_created_at_uses_clock(self):
        clock = Clock(tps=20)
        channel = FeedbackChannel(clock)
        for _ in range(10):
            clock.advance()
        assert channel.report(Miss()).created_at == pytest.approx(0.5)

    def test_custom_texts(self):
        config = GameConfig(miss_text="Nope")
        channel = FeedbackChannel(Clock(tps=20), config)
        assert channel.report(Miss()).text == "Nope"


class TestFeedbackExpiry:

    def test_miss_expires_after_delay(self, channel):
        """Hit/miss messages clear themselves after feedback_ticks."""
        channel.report(Miss())
        _advance(channel, TICKS - 1)
        assert channel.state is FeedbackState.ACTIVE
        channel.advance()
        assert channel.state is FeedbackState.IDLE
        assert channel.message is None

    def test_hit_expires_after_delay(self, channel):
        channel.report(Hit(target_id=1, distance=1.0))
        _advance(channel, TICKS)
        assert channel.message is None

    def test_new_message_cancels_old_timer(self, channel):
        """A message arriving mid-life restarts the countdown."""
        channel.report(Miss())
        _advance(channel, 20)
        second = channel.report(Hit(target_id=0, distance=1.0))
        _advance(channel, TICKS - 1)
        assert channel.message is second
        channel.advance()
        assert channel.message is None

    def test_win_never_expires(self, channel):
        channel.report(Hit(target_id=0, distance=0.0), completed=True)
        assert channel.expiry is None
        _advance(channel, TICKS * 5)
        assert channel.message.kind is FeedbackKind.WIN

    def test_win_cancels_pending_clear(self, channel):
        """A pending hit clear must not wipe the win message."""
        channel.report(Hit(target_id=0, distance=0.0))
        _advance(channel, TICKS - 2)
        channel.report(Hit(target_id=1, distance=0.0), completed=True)
        _advance(channel, TICKS * 2)
        assert channel.message.kind is FeedbackKind.WIN

    def test_release_lets_win_expire(self, channel):
        channel.report(Hit(target_id=0, distance=0.0), completed=True)
        channel.release()
        assert channel.expiry is not None
        _advance(channel, TICKS)
        assert channel.message is None

    def test_release_keeps_running_timer(self, channel):
        """Releasing an already-expiring message does not extend it."""
        channel.report(Miss())
        _advance(channel, 10)
        channel.release()
        _advance(channel, TICKS - 10)
        assert channel.message is None

    def test_release_when_idle_is_noop(self, channel):
        channel.release()
        assert channel.expiry is None
        assert channel.state is FeedbackState.IDLE

    def test_clear(self, channel):
        channel.report(Miss())
        channel.clear()
        assert channel.state is FeedbackState.IDLE
        assert channel.expiry is None
