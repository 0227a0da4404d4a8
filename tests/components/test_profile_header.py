"""Profile header tests: the home page content and its layout shell."""

import pytest

from personal_site.components.profile_header import ProfileHeaderService
from personal_site.config import SiteConfig
from tests.html_helpers import find_all, outbound_links


@pytest.fixture
def home(client):
    response = client.get("/")
    assert response.status_code == 200
    return response.get_data(as_text=True)


# --- Heading -------------------------------------------------------------------


def test_exactly_one_heading_with_greeting(home):
    headings = [el for tag in ("h1", "h2", "h3", "h4", "h5", "h6") for el in find_all(home, tag)]
    assert len(headings) == 1
    assert headings[0]["tag"] == "h1"
    assert headings[0]["text"].strip() == "Hello and Namaste!"


# --- Social links --------------------------------------------------------------


def test_exactly_two_outbound_links_in_order(home):
    links = outbound_links(home)
    assert [link["attrs"]["href"] for link in links] == [
        "https://github.com/snwzd",
        "https://www.linkedin.com/in/mprasadme",
    ]
    assert [link["text"].strip() for link in links] == ["GitHub", "LinkedIn"]


def test_social_links_are_secondary_buttons(home):
    for link in outbound_links(home):
        assert link["attrs"]["class"] == "button button--secondary button--md"


def test_layout_links_stay_internal(home):
    internal = [
        link["attrs"]["href"] for link in find_all(home, "a")
        if not link["attrs"]["href"].startswith("http")
    ]
    assert "/" in internal
    assert "/blog.html" in internal


# --- Image and description -----------------------------------------------------


def test_profile_image_source_and_alt(home):
    images = find_all(home, "img")
    assert len(images) == 1
    assert images[0]["attrs"]["src"] == "/img/profile.png"
    assert images[0]["attrs"]["alt"] == "Profile"


def test_description_mentions_role_employer_and_hobby(home):
    paragraphs = [el for el in find_all(home, "p") if el["attrs"].get("class") == "profile-description"]
    assert len(paragraphs) == 1
    text = paragraphs[0]["text"]
    for needle in ("Cloud Engineer", "RTDS", "sketching"):
        assert needle in text


def test_meta_description(home):
    metas = [el for el in find_all(home, "meta") if el["attrs"].get("name") == "description"]
    assert metas[0]["attrs"]["content"] == "Personal website."


# --- Determinism ---------------------------------------------------------------


def test_rerender_is_byte_identical(client):
    first = client.get("/").get_data()
    second = client.get("/").get_data()
    assert first == second


def test_index_html_alias_matches_root(client):
    assert client.get("/index.html").get_data() == client.get("/").get_data()


def test_profile_image_asset_is_served(client):
    response = client.get("/img/profile.png")
    assert response.status_code == 200
    assert response.mimetype == "image/png"
    response.close()


# --- Service -------------------------------------------------------------------


def test_service_returns_copies_of_config():
    config = {"PROFILE": SiteConfig.PROFILE, "SOCIAL_LINKS": SiteConfig.SOCIAL_LINKS}
    service = ProfileHeaderService(config)

    profile = service.get_profile()
    profile["links"][0]["url"] = "https://example.com"
    profile["heading"] = "changed"

    assert SiteConfig.SOCIAL_LINKS[0]["url"] == "https://github.com/snwzd"
    assert SiteConfig.PROFILE["heading"] == "Hello and Namaste!"
