import pytest
from django.urls import reverse, resolve


@pytest.mark.django_db
@pytest.mark.parametrize("url_name, kwargs, expected_statuses", [
    ("robots_txt", {}, (200,)),
    ("options:page", {"menu_slug": "robots-txt-lite"}, (302,)),
    ("admin:index", {}, (302,)),
])
def test_project_urls(client, url_name, kwargs, expected_statuses):
    """
    Test that each project-level named URL can be reversed, resolved, and returns a valid response.
    Admin pages redirect anonymous users to the login page.
    """
    url = reverse(url_name, kwargs=kwargs)
    match = resolve(url)
    assert match.view_name == url_name

    response = client.get(url)
    assert response.status_code in expected_statuses


def test_settings_pages_are_routed_before_admin_catch_all():
    match = resolve("/admin/options/robots-txt-lite/")
    assert match.view_name == "options:page"
    assert match.kwargs == {"menu_slug": "robots-txt-lite"}
