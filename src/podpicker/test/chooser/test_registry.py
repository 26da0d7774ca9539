import pytest

from podpicker.chooser.random_chooser import RandomPodChooser
from podpicker.chooser.registry import get_chooser, get_registered_modes
from podpicker.chooser.sticky_chooser import StickyPodChooser
from podpicker.constants import LoadBalanceMode
from podpicker.test.fakes import FixedDraws, make_pod_client


def test_registered_modes():
    assert get_registered_modes() == ["random", "sticky"]


def test_random_mode_builds_random_chooser(group):
    draws = FixedDraws(0)
    chooser = get_chooser(
        "random", pod_client=make_pod_client(), group=group, rand_source=draws
    )

    assert isinstance(chooser, RandomPodChooser)
    assert chooser.rand_source is draws


def test_sticky_mode_accepts_enum(group):
    chooser = get_chooser(
        LoadBalanceMode.STICKY, pod_client=make_pod_client(), group=group, key="ctx"
    )

    assert isinstance(chooser, StickyPodChooser)
    assert chooser.key == "ctx"


def test_sticky_mode_requires_key(group):
    with pytest.raises(ValueError, match="requires a key"):
        get_chooser("sticky", pod_client=make_pod_client(), group=group)


def test_unknown_mode(group):
    with pytest.raises(ValueError, match="Available modes"):
        get_chooser("round-robin", pod_client=make_pod_client(), group=group)
