import pytest

from cnge.loader import Loader, LoadingError
from cnge.resource import Resource


class Recorder(Resource):
    def __init__(self, succeed=True):
        super().__init__(True)
        self.succeed = succeed
        self.calls = []

    def custom_gather(self):
        self.calls.append("gather")
        return self.succeed

    def custom_discard(self):
        self.calls.append("discard")

    def custom_load(self):
        self.calls.append("load")

    def custom_unload(self):
        self.calls.append("unload")


def run(loader):
    loader.start()
    loader.join()
    loader.update()


def test_loads_all_resources():
    first, second = Recorder(), Recorder()
    loader = Loader()
    loader.setup(2)
    loader.give_load_resource(first)
    loader.give_load_resource(second)
    run(loader)
    assert loader.done()
    assert loader.completed == loader.total == 2
    for resource in (first, second):
        assert resource.loaded()
        assert not resource.gathered()
        assert resource.calls == ["gather", "load", "discard"]


def test_failed_gather_raises_on_update():
    loader = Loader()
    loader.setup(1)
    loader.give_load_resource(Recorder(succeed=False))
    loader.start()
    loader.join()
    with pytest.raises(LoadingError):
        loader.update()


def test_unloads_old_resources():
    old = Recorder()
    old.gather()
    old.load()
    old.discard()
    new = Recorder()

    loader = Loader()
    loader.setup(1, 1)
    loader.give_load_resource(new)
    loader.give_unload_resource(old)
    run(loader)
    assert loader.done()
    assert new.loaded()
    assert not old.loaded()
    assert old.calls[-1] == "unload"


def test_shared_resource_is_kept():
    shared = Recorder()
    shared.gather()
    shared.load()
    shared.discard()

    loader = Loader()
    loader.setup(1, 1)
    loader.give_load_resource(shared)
    loader.give_unload_resource(shared)
    assert loader.completed == 1
    run(loader)
    assert loader.done()
    assert shared.loaded()
    assert "unload" not in shared.calls


def test_already_loaded_counts_at_start():
    loaded = Recorder()
    loaded.load()
    loader = Loader()
    loader.setup(1)
    loader.give_load_resource(loaded)
    loader.start()
    loader.join()
    assert loader.done()
    loader.update()
    assert loaded.calls == ["load"]


def test_not_done_before_update():
    loader = Loader()
    loader.setup(1)
    loader.give_load_resource(Recorder())
    loader.start()
    loader.join()
    assert not loader.done()
    loader.update()
    assert loader.done()


def test_quick_load():
    first, second = Recorder(), Recorder()
    loader = Loader()
    loader.setup(2)
    loader.give_load_resource(first)
    loader.give_load_resource(second)
    loader.quick_load()
    assert first.loaded() and second.loaded()
    assert first.calls == ["gather", "load", "discard"]