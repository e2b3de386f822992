import threading

from videoup.models import VideoBase
from videoup.services.video_registry import VideoRegistry, data_url, data_url_base


def make_video(title="clip"):
    return VideoBase(title=title, duration=30, contentType="video/mp4")


def test_first_id_is_one(registry):
    video = registry.add(make_video(), "http://localhost:8080")
    assert video.id == 1
    assert video.dataUrl == "http://localhost:8080/video/1/data"


def test_ids_strictly_increasing(registry):
    ids = [registry.add(make_video(f"v{i}"), "http://h").id for i in range(5)]
    assert ids == [1, 2, 3, 4, 5]
    assert len(registry) == 5


def test_get_by_id(registry):
    registry.add(make_video("a"), "http://h")
    b = registry.add(make_video("b"), "http://h")
    assert registry.get(b.id).title == "b"
    assert b.id in registry
    assert registry.get(99) is None
    assert registry.get(0) is None


def test_list_keeps_insertion_order(registry):
    for title in ("a", "b", "c"):
        registry.add(make_video(title), "http://h")
    assert [v.title for v in registry.list()] == ["a", "b", "c"]


def test_list_is_a_copy(registry):
    registry.add(make_video(), "http://h")
    registry.list().clear()
    assert len(registry.list()) == 1


def test_data_url_base_omits_default_port():
    assert data_url_base("example.com", 80) == "http://example.com"
    assert data_url_base("example.com", None) == "http://example.com"
    assert data_url_base("example.com", 8080) == "http://example.com:8080"


def test_data_url():
    assert data_url("http://example.com/", 7) == "http://example.com/video/7/data"


def test_concurrent_adds_never_collide():
    registry = VideoRegistry()

    def worker():
        for _ in range(50):
            registry.add(make_video(), "http://h")

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    ids = [v.id for v in registry.list()]
    assert len(ids) == 400
    assert sorted(set(ids)) == list(range(1, 401))


def test_data_url_base_brackets_ipv6():
    assert data_url_base("::1", 8080) == "http://[::1]:8080"
    assert data_url_base("[::1]", None) == "http://[::1]"
