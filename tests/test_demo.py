from minheap.demo import main


def test_main_returns_zero_and_reports(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert "first: 5 6 8 9 7" in lines
    assert "extracted min: 5" in lines
    assert "current min: 6" in lines


def test_main_reports_cleared_heaps(capsys):
    main([])
    lines = capsys.readouterr().out.splitlines()
    assert "first empty: True" in lines
    assert "second empty: True" in lines
    assert "after removals: 6 9 8" in lines


def test_main_reports_copied_heap_contents(capsys):
    main([])
    lines = capsys.readouterr().out.splitlines()
    assert "second: 1 2 3 4" in lines
    assert "third: 100 200 300 400" in lines