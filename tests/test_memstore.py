import threading
from datetime import datetime, timezone

from burovichok.memstore import BlocksStorage
from burovichok.models import TableOne, TableThree, TableTwo


def _one(pressure):
    return TableOne(
        timestamp=datetime(2024, 11, 9, 17, 21, 21, tzinfo=timezone.utc),
        pressure_depth=pressure,
        temperature_depth=20.0,
    )


def test_new_storage_is_empty():
    store = BlocksStorage()
    assert store.count_block_one() == 0
    assert store.count_block_two() == 0
    assert store.count_block_three() == 0
    assert store.get_all_block_one_data() == []
    assert store.get_all_block_two_data() == []
    assert store.get_all_block_three_data() == []


def test_block_one_data_accumulates_in_order():
    store = BlocksStorage()
    first = [_one(1.0), _one(2.0)]
    second = [_one(3.0)]
    store.add_block_one_data(first)
    store.add_block_one_data(second)
    assert store.count_block_one() == 3
    assert store.get_all_block_one_data() == first + second


def test_returned_data_is_a_copy():
    store = BlocksStorage()
    store.add_block_one_data([_one(1.0)])
    result = store.get_all_block_one_data()
    result[0].pressure_depth = 99.0
    result.append(_one(5.0))
    assert store.get_all_block_one_data() == [_one(1.0)]


def test_added_records_are_copied():
    store = BlocksStorage()
    record = _one(1.0)
    store.add_block_one_data([record])
    record.pressure_depth = 42.0
    assert store.get_all_block_one_data()[0].pressure_depth == 1.0


def test_block_two_and_three_round_trip():
    store = BlocksStorage()
    twos = [TableTwo(pressure_tubing=1.5), TableTwo(pressure_linear=2.5)]
    threes = [TableThree(flow_liquid=10.0, water_cut=50.0)]
    store.add_block_two_data(twos)
    store.add_block_three_data(threes)
    assert store.get_all_block_two_data() == twos
    assert store.get_all_block_three_data() == threes
    assert store.count_block_two() == len(twos)
    assert store.count_block_three() == len(threes)


def test_clear_all_empties_blocks():
    store = BlocksStorage()
    store.add_block_one_data([_one(1.0)])
    store.add_block_two_data([TableTwo()])
    store.add_block_three_data([TableThree()])
    store.clear_all()
    assert store.count_block_one() == 0
    assert store.count_block_two() == 0
    assert store.count_block_three() == 0
    store.add_block_one_data([_one(7.0)])
    assert store.get_all_block_one_data() == [_one(7.0)]


def test_concurrent_adds_are_all_kept():
    store = BlocksStorage()

    def worker():
        for _ in range(50):
            store.add_block_one_data([_one(1.0)])

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert store.count_block_one() == 4 * 50