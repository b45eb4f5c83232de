import pytest

from cnge.input import Input
from cnge.loader import LoadingError
from cnge.loop import Timing
from cnge.resource import Resource
from cnge.scene import LoadScreen, Scene, SceneManager, SceneSwitch


class Plain(Resource):
    def __init__(self, name):
        super().__init__(False)
        self.name = name
        self.events = []

    def custom_gather(self):
        return True

    def custom_discard(self):
        self.events.append("discard")

    def custom_load(self):
        self.events.append("load")

    def custom_unload(self):
        self.events.append("unload")


class Failing(Resource):
    def __init__(self):
        super().__init__(True)

    def custom_gather(self):
        return False

    def custom_discard(self):
        pass

    def custom_load(self):
        pass

    def custom_unload(self):
        pass


class Screen(LoadScreen):
    def __init__(self):
        self.sizes = []
        self.updates = 0
        self.progress = []

    def resized(self, width, height):
        self.sizes.append((width, height))

    def update(self, input, timing):
        self.updates += 1

    def render(self, completed, total):
        self.progress.append((completed, total))


class Stage(Scene):
    def __init__(self, bundle):
        super().__init__(bundle)
        self.started = 0
        self.sizes = []
        self.frames = 0
        self.renders = 0
        self.next = None

    def start(self):
        self.started += 1

    def resized(self, width, height):
        self.sizes.append((width, height))

    def update(self, input, timing):
        self.frames += 1

    def render(self):
        self.renders += 1

    def switch_scene(self):
        return self.next


@pytest.fixture
def window():
    state = Input()
    state.resize(640, 480)
    return state


@pytest.fixture
def timing():
    return Timing(60, 16_000_000, 0.016)


def _run_until_loaded(manager, window, timing, limit=50):
    for _ in range(limit):
        manager.loader.join()
        manager.update(window, timing)
        if not manager.is_loading:
            return
    raise AssertionError("loading never finished")


def test_start_sets_loading_and_sizes_screen(window):
    manager = SceneManager()
    screen = Screen()
    manager.start(window, Stage([Plain("a")]), screen)
    assert manager.is_loading is True
    assert screen.sizes == [(640, 480)]
    assert manager.loader.total == 1


def test_loading_finishes_and_starts_scene(window, timing):
    manager = SceneManager()
    resource = Plain("a")
    stage = Stage([resource])
    manager.start(window, stage, Screen())
    _run_until_loaded(manager, window, timing)
    assert resource.loaded()
    assert stage.started == 1
    assert stage.sizes == [(640, 480)]
    assert manager.loader.done()


def test_scene_updates_after_loading(window, timing):
    manager = SceneManager()
    stage = Stage([])
    manager.start(window, stage, Screen())
    _run_until_loaded(manager, window, timing)
    manager.update(window, timing)
    manager.update(window, timing)
    assert stage.frames == 2
    assert stage.renders == 2
    assert manager.is_loading is False


def test_resized_window_reaches_scene(window, timing):
    manager = SceneManager()
    stage = Stage([])
    manager.start(window, stage, Screen())
    _run_until_loaded(manager, window, timing)
    window.resize(800, 600)
    manager.update(window, timing)
    assert stage.sizes[-1] == (800, 600)


def test_switch_unloads_old_and_keeps_shared(window, timing):
    shared = Plain("shared")
    old_only = Plain("old")
    new_only = Plain("new")
    first = Stage([shared, old_only])
    second = Stage([shared, new_only])

    manager = SceneManager()
    manager.start(window, first, Screen())
    _run_until_loaded(manager, window, timing)

    second_screen = Screen()
    first.next = SceneSwitch(second, second_screen)
    manager.update(window, timing)
    assert manager.is_loading is True
    assert manager.scene is second
    assert second_screen.sizes == [(640, 480)]

    _run_until_loaded(manager, window, timing)
    assert shared.loaded()
    assert new_only.loaded()
    assert not old_only.loaded()
    assert shared.events.count("load") == 1
    assert second.started == 1


def test_no_switch_keeps_scene(window, timing):
    manager = SceneManager()
    stage = Stage([])
    manager.start(window, stage, Screen())
    _run_until_loaded(manager, window, timing)
    assert manager.update_scene(window, timing) is False
    assert manager.scene is stage


def test_update_before_start_raises(window, timing):
    manager = SceneManager()
    with pytest.raises(RuntimeError):
        manager.update(window, timing)


def test_loading_error_propagates(window, timing):
    manager = SceneManager()
    manager.start(window, Stage([Failing()]), Screen())
    manager.loader.join()
    with pytest.raises(LoadingError):
        manager.update(window, timing)


def test_loading_screen_renders_progress_while_waiting(window, timing):
    class Slow(Resource):
        def __init__(self):
            super().__init__(True)

        def custom_gather(self):
            return True

        def custom_discard(self):
            pass

        def custom_load(self):
            pass

        def custom_unload(self):
            pass

    manager = SceneManager()
    screen = Screen()
    slow = Slow()
    manager.start(window, Stage([slow, Plain("a")]), screen)
    manager.loader.join()
    # Force one resource back to ungathered so the first frame keeps loading.
    slow._gathered = False
    assert manager.update_loading(window, timing) is True
    assert screen.updates == 1
    completed, total = screen.progress[-1]
    assert total == 2
    assert completed < total


def test_bundle_is_copied_into_list(window):
    resources = (Plain("a"), Plain("b"))
    stage = Stage(resources)
    manager = SceneManager()
    manager.start(window, stage, Screen())
    assert stage.bundle == list(resources)
    assert manager.loader.total == 2
    assert manager.scene is stage