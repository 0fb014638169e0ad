from __future__ import annotations

import subprocess
import sys


def test_package_does_not_need_matplotlib():
    # matplotlib is only needed by the demos (the "demo" extra)
    code = (
        "import sys\n"
        "import number_pairing, number_pairing.cli, number_pairing.reference\n"
        "assert 'matplotlib' not in sys.modules\n"
    )
    result = subprocess.run([sys.executable, "-c", code], capture_output=True, text=True)
    assert result.returncode == 0, result.stderr
