import io

import pytest

from listmaker.cli import ListMaker
from listmaker.prompts import Prompter


def make_app(lines, directory, items=None):
    """Build a ListMaker reading the given answer lines."""
    stdin = io.StringIO("".join(f"{line}\n" for line in lines))
    stdout = io.StringIO()
    app = ListMaker(Prompter(stdin, stdout), directory=str(directory))
    if items:
        app.session.items.extend(items)
    return app, stdout


@pytest.fixture
def app_factory(tmp_path):
    def factory(lines, items=None):
        return make_app(lines, tmp_path, items)

    return factory
