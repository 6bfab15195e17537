import pytest
from django.urls import reverse

from robots_txt_lite.models import Option
from robots_txt_lite.options import option_store
from robots_txt_lite.plugin import OPTION_NAME

DEFAULT_BODY = (
    "User-agent: *\nDisallow: /wp-admin/\nAllow: /wp-admin/admin-ajax.php\n\n"
    "Sitemap: https://example.com/wp-sitemap.xml"
)


@pytest.mark.django_db
def test_robots_txt_default_install(client):
    url = reverse("robots_txt")
    response = client.get(url)
    assert response.status_code == 200
    assert response["Content-Type"].startswith("text/plain")
    assert response.content.decode() == DEFAULT_BODY


@pytest.mark.django_db
def test_robots_txt_default_uses_current_site_url(settings, client):
    settings.SITE_URL = "https://www.example.org/"
    response = client.get(reverse("robots_txt"))
    assert response.content.decode().endswith("Sitemap: https://www.example.org/wp-sitemap.xml")


@pytest.mark.django_db
@pytest.mark.parametrize("indexable", [True, False])
def test_robots_txt_serves_saved_content(settings, client, indexable):
    settings.INDEXABLE = indexable
    option_store.update_option(OPTION_NAME, "User-agent: *\nDisallow: /private/")
    response = client.get(reverse("robots_txt"))
    assert response.status_code == 200
    assert response.content.decode() == "User-agent: *\nDisallow: /private/"


@pytest.mark.django_db
def test_robots_txt_default_overrides_non_indexable_site(settings, client):
    settings.INDEXABLE = False
    response = client.get(reverse("robots_txt"))
    body = response.content.decode()
    assert body == DEFAULT_BODY
    assert "Disallow: /\n" not in body


@pytest.mark.django_db
def test_robots_txt_serves_sanitized_content(client):
    option_store.update_option(OPTION_NAME, "User-agent: *\r\nDisallow: /tmp/<script>x()</script>\n")
    response = client.get(reverse("robots_txt"))
    assert response.content.decode() == "User-agent: *\nDisallow: /tmp/"


@pytest.mark.django_db
def test_robots_txt_serves_empty_content(client):
    Option.objects.create(name=OPTION_NAME, value="")
    response = client.get(reverse("robots_txt"))
    assert response.status_code == 200
    assert response.content == b""


@pytest.mark.django_db
def test_robots_txt_never_serves_tags_hidden_by_octets(client):
    option_store.update_option(OPTION_NAME, "User-agent: *\n<%41script>alert(1)</script>")
    stored = Option.objects.get(name=OPTION_NAME).value
    # Saving the stored value again must not change it
    assert option_store.update_option(OPTION_NAME, stored) is False

    body = client.get(reverse("robots_txt")).content.decode()
    assert body == stored
    assert "<script>" not in body
    assert "<" not in body
