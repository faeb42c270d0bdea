import pytest

from ssixwallet.widgets import (
    RecordNavigator,
    SpriteAnimator,
    connections_summary,
    height_text,
    peer_address,
    peer_list_text,
)


def test_info_texts():
    assert connections_summary(8, 5, 3) == "8 (Outgoing: 5, Incoming: 3)"
    assert peer_list_text(120, 40) == "White: 120, Grey: 40"
    assert height_text(5000, 4990) == "Known: 5000, Local: 4990"
    assert peer_address("10.0.0.1", 32347) == "10.0.0.1:32347"


def test_sprite_interval():
    assert SpriteAnimator(100, 10, 10, 0, 10).interval_ms() == 100


def test_sprite_rejects_zero_frequency():
    with pytest.raises(ValueError):
        SpriteAnimator(100, 10, 10, 0, 0)


def test_sprite_start_stop():
    animator = SpriteAnimator(100, 10, 10)
    animator.start()
    animator.start()
    assert animator.active is True
    animator.stop()
    assert animator.active is False


def test_sprite_frames_advance_and_wrap():
    animator = SpriteAnimator(sprite_height=60, frame_width=10, frame_height=10, vertical_space=5)
    first = animator.tick()
    assert first.top == 0
    assert first.right == 10
    assert first.bottom - first.top == 10
    tops = [first.top] + [animator.tick().top for _ in range(10)]
    assert all(top + 10 < 60 for top in tops)
    assert tops.count(0) > 1
    step = tops[1] - tops[0]
    assert step == 10 + 5


def test_navigator_bounds():
    navigator = RecordNavigator(0, 3)
    assert not navigator.can_go_back()
    assert navigator.can_go_forward()
    assert navigator.previous() == 0
    assert navigator.next() == 1
    assert navigator.next() == 2
    assert not navigator.can_go_forward()
    assert navigator.next() == 2
    assert navigator.previous() == 1


def test_navigator_single_row():
    navigator = RecordNavigator(0, 1)
    assert not navigator.can_go_back()
    assert not navigator.can_go_forward()


def test_navigator_rejects_bad_row():
    with pytest.raises(IndexError):
        RecordNavigator(3, 3)