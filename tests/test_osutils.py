import mmap

import pytest

from voxutil.osutils import MemUsage, parse_proc_stat, process_mem_usage


def _stat_line(vsize, rss):
    fields = ["1", "(py)", "S"] + ["0"] * 19 + [str(vsize), str(rss)] + ["0"] * 5
    return " ".join(fields) + "\n"


def test_parse_proc_stat():
    assert parse_proc_stat(_stat_line(8192, 3), 1) == MemUsage(8192.0, 3.0)


def test_parse_scales_rss_by_page_size():
    one = parse_proc_stat(_stat_line(100, 7), 1)
    paged = parse_proc_stat(_stat_line(100, 7), 4096)
    assert paged.resident_set == one.resident_set * 4096
    assert paged.vm_usage == one.vm_usage


def test_parse_too_short():
    with pytest.raises(ValueError):
        parse_proc_stat("1 (py) S 0 0", 4096)


def test_process_mem_usage_from_file(tmp_path):
    stat = tmp_path / "stat"
    stat.write_text(_stat_line(8192, 3))
    usage = process_mem_usage(str(stat))
    assert usage.vm_usage == 8192.0
    assert usage.resident_set == 3.0 * mmap.PAGESIZE


def test_process_mem_usage_missing(tmp_path):
    with pytest.raises(OSError):
        process_mem_usage(str(tmp_path / "absent"))