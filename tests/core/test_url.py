"""
Unit tests for the Url builder and its rendering.
"""

import pytest

from ixset_core import constants
from ixset_core.errors import DomainError, JoinError, ParamError, PathError
from ixset_core.url import Scheme, Url

DOMAIN = "test.domain.com"
DOMAIN2 = "test.domain2.com"
PNG_PATH = "images/test-image.png"
JPG_PATH = "images/test-image.jpg"
BASIC_PARAMS = [("w", "640"), ("h", "720"), ("fit", "crop")]


def test_join_params() -> None:
    assert Url.join_params([("w", "300")]) == "w=300"
    assert Url.join_params([("w", "300"), ("h", "600")]) == "w=300&h=600"
    assert Url.join_params([("w", "300"), ("h", "600"), ("fit", "crop")]) == "w=300&h=600&fit=crop"
    assert Url.join_params([]) == ""


def test_join_params_ampersand_count() -> None:
    query = Url.join_params(BASIC_PARAMS)
    assert query.count("&") == len(BASIC_PARAMS) - 1
    assert not query.startswith("&")
    assert not query.endswith("&")


def test_join_params_asserts_non_empty() -> None:
    with pytest.raises(AssertionError):
        Url.join_params([("w", "")])


def test_default_url() -> None:
    url = Url()
    assert url.get_scheme() is Scheme.HTTPS
    assert url.get_domain() == ""
    assert url.get_lib() == ""
    assert url.get_params() == ()
    assert url.get_path() is None
    assert url.get_token() is None
    assert not url.has_params()


def test_url_new() -> None:
    assert Url.new(DOMAIN).get_domain() == DOMAIN
    assert Url.new(DOMAIN).domain(DOMAIN2).get_domain() == DOMAIN2


@pytest.mark.parametrize("build", [lambda: Url.new(""), lambda: Url().domain("")])
def test_empty_domain_is_rejected(build) -> None:
    with pytest.raises(DomainError):
        build()


def test_empty_path_is_rejected() -> None:
    with pytest.raises(PathError):
        Url().path("")


@pytest.mark.parametrize(("k", "v"), [("", "320"), ("w", "")])
def test_empty_param_is_rejected(k: str, v: str) -> None:
    with pytest.raises(ParamError):
        Url().param(k, v)


def test_params_rejects_whole_batch() -> None:
    url = Url.new(DOMAIN)
    with pytest.raises(ParamError):
        url.params([("w", "320"), ("h", "")])
    assert url.get_params() == ()


def test_builders_return_new_values() -> None:
    base = Url.new(DOMAIN).path(PNG_PATH)
    with_width = base.param("w", "320")
    assert base.get_params() == ()
    assert with_width.get_params() == (("w", "320"),)
    assert base != with_width


def test_params_keep_order_and_duplicates() -> None:
    pairs = [("w", "320"), ("fit", "crop"), ("w", "640"), ("blur", "20")]
    url = Url.new(DOMAIN).path(PNG_PATH).params(pairs)
    assert url.get_params() == tuple(pairs)
    assert url.join() == f"https://{DOMAIN}/{PNG_PATH}?w=320&fit=crop&w=640&blur=20"


def test_query_round_trip() -> None:
    pairs = [("ar", "4%3A3"), ("h", "320"), ("fit", "crop"), ("h", "640")]
    joined = Url.new(DOMAIN).path(PNG_PATH).params(pairs).join()
    query = joined.split("?", 1)[1]
    assert [tuple(part.split("=", 1)) for part in query.split("&")] == pairs


def test_param_then_params_append() -> None:
    url = Url.new(DOMAIN).path("test").param("w", "320").params(BASIC_PARAMS[1:])
    assert url.join() == f"https://{DOMAIN}/test?w=320&h=720&fit=crop"


def test_join_example_domain() -> None:
    url = Url.new("example.domain.net").param("w", "320").path("test").lib("")
    assert url.join() == "https://example.domain.net/test?w=320"


def test_join_http_scheme() -> None:
    url = Url.new(DOMAIN).path("test-image.png").scheme(Scheme.HTTP).lib("")
    assert url.join() == "http://test.domain.com/test-image.png"


def test_scheme_accepts_strings() -> None:
    assert Url.new(DOMAIN).scheme("http").get_scheme() is Scheme.HTTP
    assert str(Scheme.HTTPS) == "https"
    with pytest.raises(ValueError):
        Url.new(DOMAIN).scheme("ftp")


@pytest.mark.parametrize(
    ("lib", "params", "expected"),
    [
        ("ixlib=custom-1.0", BASIC_PARAMS, f"https://{DOMAIN}/{PNG_PATH}?ixlib=custom-1.0&w=640&h=720&fit=crop"),
        ("ixlib=custom-1.0", [], f"https://{DOMAIN}/{PNG_PATH}?ixlib=custom-1.0"),
        ("", BASIC_PARAMS, f"https://{DOMAIN}/{PNG_PATH}?w=640&h=720&fit=crop"),
        ("", [], f"https://{DOMAIN}/{PNG_PATH}"),
    ],
)
def test_join_lib_and_query_cases(lib: str, params: list, expected: str) -> None:
    url = Url.new(DOMAIN).path(PNG_PATH).params(params).lib(lib)
    assert url.join() == expected


def test_join_requires_path() -> None:
    with pytest.raises(JoinError, match="path is None"):
        Url.new(DOMAIN).param("w", "320").join()


def test_url_png_src() -> None:
    url = Url.new(DOMAIN).path(PNG_PATH)
    assert url.get_scheme() is Scheme.HTTPS
    assert url.get_path() == PNG_PATH
    assert not url.has_params()
    assert url.get_token() is None
    assert url.join() == f"https://{DOMAIN}/{PNG_PATH}"


def test_url_jpg_src() -> None:
    url = Url.new(DOMAIN).path(JPG_PATH).scheme(Scheme.HTTP)
    assert url.get_scheme() is Scheme.HTTP
    assert url.join() == f"http://{DOMAIN}/{JPG_PATH}"


def test_ix_sets_library_tag() -> None:
    url = Url.new(DOMAIN).path(PNG_PATH).ix()
    assert url.get_lib() == constants.ixlib()
    assert url.join() == f"https://{DOMAIN}/{PNG_PATH}?ixlib=python-{constants.VERSION}"
    # An explicit lib wins over ix().
    assert url.lib("ixlib=other-2.0").join() == f"https://{DOMAIN}/{PNG_PATH}?ixlib=other-2.0"


def test_token_is_stored_not_rendered() -> None:
    url = Url.new(DOMAIN).path(PNG_PATH).token("secret")
    assert url.get_token() == "secret"
    assert "secret" not in url.join()
