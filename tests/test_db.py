import threading
import uuid

from src.storage.db import PointsDB


def test_put_then_get():
    db = PointsDB()
    db.put("abc", 31)
    assert db.get("abc") == 31


def test_unknown_id_reads_as_zero():
    db = PointsDB()
    assert db.get("missing") == 0


def test_put_overwrites():
    db = PointsDB()
    db.put("abc", 1)
    db.put("abc", 2)
    assert db.get("abc") == 2


def test_concurrent_writers_and_readers_lose_nothing():
    db = PointsDB()
    ids = [str(uuid.uuid4()) for _ in range(200)]
    errors = []

    def writer(chunk):
        for i, receipt_id in chunk:
            db.put(receipt_id, i)

    def reader():
        for receipt_id in ids:
            if db.get(receipt_id) not in (0, ids.index(receipt_id)):
                errors.append(receipt_id)

    indexed = list(enumerate(ids))
    threads = [threading.Thread(target=writer, args=(indexed[n::4],)) for n in range(4)]
    threads += [threading.Thread(target=reader) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert errors == []
    assert all(db.get(receipt_id) == i for i, receipt_id in indexed)
