"""Taxonomy routes — taxonomy listings and posts filtered by term.

Tests cover:
    - /taxonomies/{type}: public taxonomies only, terms by name, empty terms kept
    - /posts-by-taxonomy: hierarchical children included, cross-type results
    - every no-match case yields [] instead of an error
"""

API = "/custom-api/v1"


async def test_taxonomies_for_post(client, seed_site):
    response = await client.get(f"{API}/taxonomies/post")

    assert response.status_code == 200
    data = response.json()
    assert sorted(data) == ["category", "post_tag", "topic"]
    assert data["category"]["name"] == "Categories"
    assert [t["slug"] for t in data["category"]["terms"]] == ["empty", "news", "world"]


async def test_taxonomy_term_record(client, seed_site):
    response = await client.get(f"{API}/taxonomies/post")
    news = next(t for t in response.json()["category"]["terms"] if t["id"] == 1)

    assert news == {
        "id": 1, "name": "News", "slug": "news", "count": 2,
        "meta": {"color": ["red"]},
    }


async def test_taxonomies_for_book(client, seed_site):
    response = await client.get(f"{API}/taxonomies/book")
    assert sorted(response.json()) == ["genre", "topic"]


async def test_taxonomies_for_unknown_type(client, seed_site):
    response = await client.get(f"{API}/taxonomies/movie")
    assert response.status_code == 200
    assert response.json() == {}


async def test_posts_by_hierarchical_term_include_children(client, seed_site):
    response = await client.get(f"{API}/posts-by-taxonomy/category/1")

    assert response.status_code == 200
    assert [p["id"] for p in response.json()] == [3, 1]


async def test_posts_by_child_term_only(client, seed_site):
    response = await client.get(f"{API}/posts-by-taxonomy/category/2")
    assert [p["id"] for p in response.json()] == [3]


async def test_posts_by_term_across_types(client, seed_site):
    response = await client.get(f"{API}/posts-by-taxonomy/topic/4")

    data = response.json()
    assert [p["id"] for p in data] == [1, 6]
    assert all("custom_fields" not in p for p in data)


async def test_posts_by_empty_term(client, seed_site):
    response = await client.get(f"{API}/posts-by-taxonomy/category/3")
    assert response.json() == []


async def test_posts_by_term_from_other_taxonomy(client, seed_site):
    response = await client.get(f"{API}/posts-by-taxonomy/category/5")
    assert response.json() == []


async def test_posts_by_unknown_taxonomy(client, seed_site):
    response = await client.get(f"{API}/posts-by-taxonomy/nope/1")
    assert response.status_code == 200
    assert response.json() == []


async def test_underscored_taxonomy_does_not_route(client, seed_site):
    response = await client.get(f"{API}/posts-by-taxonomy/post_tag/7")
    assert response.status_code == 404
    assert response.json()["code"] == "rest_no_route"
