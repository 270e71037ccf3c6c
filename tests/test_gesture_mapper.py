from gesture_mapper import GestureMapper, UITarget, find_caught_item
from word_game import WordItem


def make_menu_targets():
    return [
        UITarget("Start Game", 0.35, 0.24, 0.3, 0.12),
        UITarget("Options", 0.35, 0.44, 0.3, 0.12),
        UITarget("Exit", 0.35, 0.64, 0.3, 0.12),
    ]


def test_target_center_and_contains():
    target = UITarget("Exit", 10, 20, 100, 40)
    assert target.center == (60, 40)
    assert target.contains((10, 20))
    assert target.contains((110, 60))
    assert not target.contains((111, 60))


def test_far_hand_highlights_nothing():
    targets = make_menu_targets()
    mapper = GestureMapper(targets, hover_radius=0.2, activate_radius=0.05)
    assert mapper.update((0.95, 0.05)) == []
    assert not any(t.highlighted for t in targets)


def test_hover_highlights_without_activating():
    targets = make_menu_targets()
    mapper = GestureMapper(targets, hover_radius=0.2, activate_radius=0.05)
    assert mapper.update((0.5, 0.2)) == []
    assert [t.name for t in targets if t.highlighted] == ["Start Game"]


def test_leaving_hover_clears_highlight():
    targets = make_menu_targets()
    mapper = GestureMapper(targets, hover_radius=0.2, activate_radius=0.05)
    mapper.update((0.5, 0.3))
    mapper.update((0.95, 0.95))
    assert not any(t.highlighted for t in targets)


def test_activation_fires_once_per_dwell():
    targets = make_menu_targets()
    mapper = GestureMapper(targets, hover_radius=0.2, activate_radius=0.05)
    first = mapper.update((0.5, 0.7))
    assert [t.name for t in first] == ["Exit"]
    assert mapper.update((0.51, 0.7)) == []
    assert mapper.update((0.5, 0.71)) == []


def test_activation_rearms_after_leaving_activate_radius():
    targets = make_menu_targets()
    mapper = GestureMapper(targets, hover_radius=0.2, activate_radius=0.05)
    mapper.update((0.5, 0.7))
    # still hovering, but outside the activate radius
    mapper.update((0.5, 0.8))
    assert [t.name for t in mapper.update((0.5, 0.7))] == ["Exit"]


def test_refire_fires_every_update():
    targets = make_menu_targets()
    mapper = GestureMapper(targets, hover_radius=0.2, activate_radius=0.05, refire=True)
    assert len(mapper.update((0.5, 0.5))) == 1
    assert len(mapper.update((0.5, 0.5))) == 1


def test_target_at():
    mapper = GestureMapper(make_menu_targets(), 0.2, 0.05)
    assert mapper.target_at((0.5, 0.5)).name == "Options"
    assert mapper.target_at((0.1, 0.1)) is None


def test_caught_item_is_first_in_list_not_closest():
    far = WordItem("Apple", 140, 100)
    near = WordItem("Grape", 101, 100)
    assert find_caught_item((100, 100), [far, near], 50) is far


def test_catch_box_is_exclusive():
    word = WordItem("Apple", 150, 100)
    assert find_caught_item((100, 100), [word], 50) is None
    assert find_caught_item((100, 149.5), [WordItem("Date", 100, 100)], 50) is not None


def test_no_hand_catches_nothing():
    assert find_caught_item(None, [WordItem("Apple", 0, 0)], 50) is None
