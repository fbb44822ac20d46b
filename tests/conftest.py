import stat
import sys
from pathlib import Path

import pytest

FAKE_GS = '''#!{python}
import sys, time
args = sys.argv[1:]
out = [a.split("=", 1)[1] for a in args if a.startswith("-sOutputFile=")][0]
inputs = [a for a in args if not a.startswith("-")]
mode = {mode!r}
if mode == "sleep":
    time.sleep(30)
if mode == "fail":
    sys.stderr.write("Error: /undefined in broken.pdf\\n")
    sys.exit(3)
if mode == "ok":
    with open(out, "wb") as fh:
        for p in inputs:
            with open(p, "rb") as src:
                fh.write(src.read())
sys.exit(0)
'''


@pytest.fixture
def pdfs(tmp_path: Path):
    """Three tiny placeholder input files."""
    files = []
    for name in ("a.pdf", "b.pdf", "c.pdf"):
        p = tmp_path / name
        p.write_bytes(b"%PDF-1.4 " + name.encode())
        files.append(p)
    return files


@pytest.fixture
def fake_gs(tmp_path: Path):
    """Factory writing an executable stand-in for Ghostscript.

    mode: "ok" writes the output, "noop" exits 0 without output,
    "fail" exits 3, "sleep" hangs.
    """
    def make(mode: str = "ok") -> Path:
        script = tmp_path / f"fake_gs_{mode}"
        script.write_text(FAKE_GS.format(python=sys.executable, mode=mode), encoding="utf-8")
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return script

    return make
