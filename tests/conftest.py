import os
import subprocess
import sys
import textwrap
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parent.parent


def write(p: Path, text: str) -> Path:
    """Записывает текст в файл, создавая родительские директории при необходимости."""
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(text, encoding="utf-8")
    return p



SAMPLE_TEMPLATE = textwrap.dedent("""\
    <ul>
    {% for user in users %}
      {% if user.active %}
        <li>{{ user.name }}</li>
      {% elif user.pending %}
        <li class="pending">{{ user.name }}</li>
      {% else %}
        {# inactive #}
      {% endif %}
    {% endfor %}
    </ul>""")


@pytest.fixture
def sample_template() -> str:
    """Корректный шаблон: цикл с цепочкой if/elif/else внутри."""
    return SAMPLE_TEMPLATE


@pytest.fixture
def tmpproj(tmp_path: Path) -> Path:
    """Каталог с шаблоном page.j2 (SAMPLE_TEMPLATE)."""
    write(tmp_path / "page.j2", SAMPLE_TEMPLATE + "\n")
    return tmp_path


@pytest.fixture
def run_cli():
    """Запускает jbv.cli в подпроцессе в заданном каталоге."""
    def _run(root: Path, *args: str, input: str | None = None) -> subprocess.CompletedProcess:
        env = os.environ.copy()
        env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(REPO_ROOT), env.get("PYTHONPATH")]))
        return subprocess.run(
            [sys.executable, "-m", "jbv.cli", *args],
            cwd=root, env=env, capture_output=True, text=True, encoding="utf-8", input=input,
        )
    return _run
