"""Property tests for the JSON:API codec.

Encoding a resource and decoding the resulting document recovers the same
resource, and a collection decodes item by item in order.
"""

from __future__ import annotations

import json

from hypothesis import given, settings
from hypothesis import strategies as st

from kitsu.codec import encode_body, marshal_payload, unmarshal_many_payload, unmarshal_payload
from kitsu.models.resource import Anime, Link, User

# --- Strategies ---

ids = st.from_regex(r"[1-9][0-9]{0,7}", fullmatch=True)
optional_text = st.none() | st.text(max_size=40)
optional_count = st.none() | st.integers(min_value=0, max_value=10**9)
self_links = st.builds(
    Link,
    self_link=st.just("") | ids.map(lambda i: f"https://kitsu.io/api/edge/users/{i}"),
)

users = st.builds(
    User,
    id=ids,
    type=st.just("users"),
    links=self_links,
    name=optional_text,
    slug=optional_text,
    about=optional_text,
    location=optional_text,
    life_spent_on_anime=optional_count,
    followers_count=optional_count,
    following_count=optional_count,
)

anime = st.builds(
    Anime,
    id=ids,
    type=st.just("anime"),
    slug=optional_text,
    synopsis=optional_text,
    canonical_title=optional_text,
    average_rating=st.none() | st.decimals(min_value=0, max_value=100, places=2).map(str),
    episode_count=optional_count,
    subtype=st.none() | st.sampled_from(["TV", "movie", "OVA", "ONA", "special"]),
)


@settings(max_examples=200)
@given(user=users)
def test_user_round_trip(user: User) -> None:
    decoded = unmarshal_payload(encode_body(user), User)
    assert decoded.model_dump() == user.model_dump()


@settings(max_examples=200)
@given(item=anime)
def test_anime_round_trip(item: Anime) -> None:
    decoded = unmarshal_payload(encode_body(item), Anime)
    assert decoded.model_dump() == item.model_dump()


@settings(max_examples=100)
@given(items=st.lists(anime, max_size=10))
def test_collection_preserves_order(items: list[Anime]) -> None:
    document = {"data": [marshal_payload(a)["data"] for a in items]}

    decoded, _ = unmarshal_many_payload(json.dumps(document), Anime)

    assert [a.model_dump() for a in decoded] == [a.model_dump() for a in items]
