import os

from ws2812tool.mru import Mru


def test_add_moves_existing_to_top():
    mru = Mru()
    for name in ("a", "b", "c", "a"):
        mru.add(name)
    assert mru.save_to() == ["b", "c", "a"]
    assert mru.last_file() == "a"


def test_limit_drops_oldest():
    mru = Mru()
    names = [f"f{i}" for i in range(Mru.LIMIT + 5)]
    for name in names:
        mru.add(name)
    assert len(mru) == Mru.LIMIT
    assert mru.save_to() == names[-Mru.LIMIT:]


def test_load_from_truncates_and_round_trips():
    mru = Mru()
    names = [f"f{i}" for i in range(Mru.LIMIT + 3)]
    mru.load_from(names)
    assert mru.save_to() == names[: Mru.LIMIT]
    other = Mru()
    other.load_from(mru.save_to())
    assert list(other) == list(mru)


def test_empty_values():
    mru = Mru()
    assert mru.last_file() == ""
    assert mru.last_dir() == ""
    assert len(mru) == 0


def test_last_dir(tmp_path):
    mru = Mru()
    mru.add(str(tmp_path / "x.bin"))
    assert mru.last_dir() == str(tmp_path)


def test_clear():
    mru = Mru()
    mru.add("a")
    mru.clear()
    assert mru.save_to() == []


def test_remove_obsolete_files(tmp_path):
    present = tmp_path / "present.txt"
    present.write_text("x")
    mru = Mru()
    mru.add(str(tmp_path / "missing.txt"))
    mru.add(str(present))
    mru.add(str(tmp_path))
    mru.remove_obsolete_files()
    assert mru.save_to() == [str(present)]
    assert os.path.isfile(mru.last_file())