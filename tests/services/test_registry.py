import threading

from fakes import make_user
from tourguide.services.registry import UserRegistry


def test_add_is_create_if_absent():
    registry = UserRegistry()
    first = make_user("jon")
    second = make_user("jon")

    assert registry.add(first) is first
    assert registry.add(second) is first
    assert registry.get("jon") is first
    assert len(registry) == 1
    assert "jon" in registry
    assert "jane" not in registry
    assert registry.get("jane") is None


def test_concurrent_adds_keep_one_user_per_name():
    registry = UserRegistry()
    winners = []
    lock = threading.Lock()

    def add(i):
        user = registry.add(make_user(f"user{i % 10}"))
        with lock:
            winners.append(user)

    threads = [threading.Thread(target=add, args=(i,)) for i in range(100)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(registry) == 10
    by_name = {}
    for user in winners:
        assert by_name.setdefault(user.user_name, user) is user


def test_all_returns_a_copy():
    registry = UserRegistry()
    registry.add(make_user("a"))
    users = registry.all()
    users.clear()
    assert len(registry.all()) == 1
