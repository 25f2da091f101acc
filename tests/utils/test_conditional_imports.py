
import pytest

from geodetics.utils.conditional_imports import ConditionalPackageInterceptor


@pytest.fixture
def permitted(monkeypatch):
    monkeypatch.setattr(ConditionalPackageInterceptor, 'PERMITTED_PACKAGES', {})
    monkeypatch.setattr(ConditionalPackageInterceptor, 'AUTO_DOWNLOAD', False)
    return ConditionalPackageInterceptor.PERMITTED_PACKAGES


def test_permit_packages(permitted):
    ConditionalPackageInterceptor.permit_packages(['mgrs'])
    ConditionalPackageInterceptor.permit_packages({'geographiclib': 'geodetics[karney]'})
    assert permitted == {'mgrs': 'mgrs', 'geographiclib': 'geodetics[karney]'}

    with pytest.raises(TypeError):
        ConditionalPackageInterceptor.permit_packages(('mgrs', ))


def test_find_spec(permitted):
    ConditionalPackageInterceptor.permit_packages({'geographiclib': 'geodetics[karney]'})

    # Packages that weren't permitted are left to importlib
    assert ConditionalPackageInterceptor.find_spec('not_a_package', None) is None

    with pytest.raises(ModuleNotFoundError, match=r'pip install geodetics\[karney\]'):
        ConditionalPackageInterceptor.find_spec('geographiclib', None)


def test_package_registers_optional_imports():
    import geodetics  # noqa: F401

    assert ConditionalPackageInterceptor.PERMITTED_PACKAGES['mgrs'] == 'geodetics[mgrs]'
    assert ConditionalPackageInterceptor.PERMITTED_PACKAGES['geographiclib'] == 'geodetics[karney]'
