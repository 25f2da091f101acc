from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]


def test_version_file_ships_with_sdist():
    # setup.py reads VERSION, so source distributions must include it
    manifest = (ROOT / 'MANIFEST.in').read_text(encoding='utf-8').splitlines()
    assert 'include VERSION' in manifest


def test_version_matches_version_file():
    import geodetics

    assert geodetics.__version__ == (ROOT / 'VERSION').read_text(encoding='utf-8').strip()
