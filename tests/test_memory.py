from barstatus.components import memory


def _meminfo(tmp_path, name="meminfo", **fields):
    order = [
        "MemTotal", "MemFree", "MemAvailable", "Buffers", "Cached",
        "SwapCached", "SwapTotal", "SwapFree",
    ]
    lines = [f"{key}:{value:>16} kB" for key in order
             if (value := fields.get(key)) is not None]
    path = tmp_path / name
    path.write_text("\n".join(lines) + "\n")
    return str(path)


def test_parse_meminfo_reads_values():
    text = "MemTotal:     1000 kB\nMemFree:  200 kB\nHugePages_Total: 0\n"
    info = memory.parse_meminfo(text)
    assert info["MemTotal"] == 1000
    assert info["MemFree"] == 200
    assert info["HugePages_Total"] == 0


def test_parse_meminfo_skips_garbage():
    assert memory.parse_meminfo("nonsense\nKey: abc kB\n") == {}


def test_ram_perc(tmp_path):
    path = _meminfo(tmp_path, MemTotal=1000, MemFree=200, MemAvailable=600,
                    Buffers=100, Cached=200)
    assert memory.ram_perc(None, path) == "50"


def test_ram_total(tmp_path):
    path = _meminfo(tmp_path, MemTotal=1048576, MemFree=1, MemAvailable=1,
                    Buffers=0, Cached=0)
    assert memory.ram_total(None, path) == "1.0 Gi"


def test_ram_free_reports_available(tmp_path):
    full = _meminfo(tmp_path, "a", MemTotal=9000, MemFree=10, MemAvailable=4096,
                    Buffers=0, Cached=0)
    other = _meminfo(tmp_path, "b", MemTotal=4096)
    assert memory.ram_free(None, full) == memory.ram_total(None, other)


def test_ram_used_excludes_buffers_and_cache(tmp_path):
    full = _meminfo(tmp_path, "a", MemTotal=10000, MemFree=2000, MemAvailable=5000,
                    Buffers=1000, Cached=3000)
    other = _meminfo(tmp_path, "b", MemTotal=4000)
    assert memory.ram_used(None, full) == memory.ram_total(None, other)


def test_ram_perc_zero_total(tmp_path):
    path = _meminfo(tmp_path, MemTotal=0, MemFree=0, MemAvailable=0,
                    Buffers=0, Cached=0)
    assert memory.ram_perc(None, path) is None


def test_missing_file_gives_none(tmp_path):
    missing = str(tmp_path / "absent")
    assert memory.ram_total(None, missing) is None
    assert memory.swap_total(None, missing) is None


def test_swap_used_equals_total_when_nothing_free(tmp_path):
    path = _meminfo(tmp_path, SwapTotal=2048, SwapFree=0, SwapCached=0)
    assert memory.swap_used(None, path) == memory.swap_total(None, path)


def test_swap_free_equals_total_when_unused(tmp_path):
    path = _meminfo(tmp_path, SwapTotal=2048, SwapFree=2048, SwapCached=0)
    assert memory.swap_free(None, path) == memory.swap_total(None, path)
    assert memory.swap_perc(None, path) == "0"


def test_swap_perc_without_swap(tmp_path):
    path = _meminfo(tmp_path, SwapTotal=0, SwapFree=0, SwapCached=0)
    assert memory.swap_perc(None, path) is None


def test_swap_fields_missing(tmp_path):
    path = _meminfo(tmp_path, MemTotal=1000)
    assert memory.swap_used(None, path) is None