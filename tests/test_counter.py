from drills.counter import Counter, main


def test_counts_integers():
    ctr = Counter()
    for value in (13, 14, 16, 14, 14, 11):
        ctr.count(value)
    assert ctr.times_seen(14) == 3
    assert ctr.times_seen(13) == 1
    assert ctr.times_seen(15) == 0


def test_counts_strings():
    ctr = Counter()
    for name in ("apple", "orange", "apple"):
        ctr.count(name)
    assert ctr.times_seen("apple") == 2
    assert ctr.times_seen("orange") == 1


def test_lookup_does_not_record():
    ctr = Counter()
    ctr.times_seen("pear")
    ctr.count("pear")
    assert ctr.times_seen("pear") == 1


def test_total_matches_calls():
    ctr = Counter()
    items = ["a", "b", "a", "c", "b", "a"]
    for item in items:
        ctr.count(item)
    assert sum(ctr.times_seen(k) for k in set(items)) == len(items)


def test_main_output(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[-1] == "got 2 apples"
    assert "saw 3 values equal to 14" in out