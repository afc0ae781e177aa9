"""Fixture builders and seeding helpers shared by the endpoint tests."""
import base64
from datetime import datetime, timezone

from blogful.articles.models import Article, ArticleStyle
from blogful.comments.models import Comment
from blogful.models import to_iso_utc
from blogful.users.models import User
from blogful.users.service import hash_password

CREATED = datetime(2029, 1, 22, 16, 28, 32, 615000, tzinfo=timezone.utc)


def make_users():
    return [
        {"id": 1, "user_name": "test-user-1", "full_name": "Test user 1", "nickname": "TU1", "password": "password", "date_created": CREATED},
        {"id": 2, "user_name": "test-user-2", "full_name": "Test user 2", "nickname": "TU2", "password": "password", "date_created": CREATED},
        {"id": 3, "user_name": "test-user-3", "full_name": "Test user 3", "nickname": "TU3", "password": "password", "date_created": CREATED},
        {"id": 4, "user_name": "test-user-4", "full_name": "Test user 4", "nickname": None, "password": "password", "date_created": CREATED},
    ]


def make_articles(users):
    lorem = "Lorem ipsum dolor sit amet, consectetur adipisicing elit. Natus consequuntur deserunt commodi."
    return [
        {"id": 1, "title": "First test post!", "style": "How-to", "author_id": users[0]["id"], "date_published": CREATED, "content": lorem},
        {"id": 2, "title": "Second test post!", "style": "Interview", "author_id": users[1]["id"], "date_published": CREATED, "content": lorem},
        {"id": 3, "title": "Third test post!", "style": "News", "author_id": users[2]["id"], "date_published": CREATED, "content": lorem},
        {"id": 4, "title": "Fourth test post!", "style": "Listicle", "author_id": users[3]["id"], "date_published": CREATED, "content": lorem},
    ]


def make_comments(users, articles):
    texts = [
        "First test comment!",
        "Second test comment!",
        "Third test comment!",
        "Fourth test comment!",
        "Fifth test comment!",
        "Sixth test comment!",
        "Seventh test comment!",
    ]
    # (article index, user index)
    placement = [(0, 0), (0, 1), (0, 2), (0, 3), (3, 0), (3, 2), (2, 3)]
    return [
        {
            "id": i + 1,
            "text": text,
            "article_id": articles[a]["id"],
            "author_id": users[u]["id"],
            "date_commented": CREATED,
        }
        for i, (text, (a, u)) in enumerate(zip(texts, placement))
    ]


def make_articles_fixtures():
    users = make_users()
    articles = make_articles(users)
    comments = make_comments(users, articles)
    return users, articles, comments


def make_expected_author(user):
    return {
        "id": user["id"],
        "user_name": user["user_name"],
        "full_name": user["full_name"],
        "nickname": user["nickname"],
        "date_created": to_iso_utc(user["date_created"]),
        "date_modified": None,
    }


def make_expected_article(users, article, comments=()):
    author = next(u for u in users if u["id"] == article["author_id"])
    number_of_comments = sum(1 for c in comments if c["article_id"] == article["id"])
    return {
        "id": article["id"],
        "style": article["style"],
        "title": article["title"],
        "content": article["content"],
        "date_published": to_iso_utc(article["date_published"]),
        "number_of_comments": number_of_comments,
        "author": make_expected_author(author),
    }


def make_expected_article_comments(users, article_id, comments):
    expected = []
    for comment in comments:
        if comment["article_id"] != article_id:
            continue
        author = next(u for u in users if u["id"] == comment["author_id"])
        expected.append({
            "id": comment["id"],
            "text": comment["text"],
            "article_id": comment["article_id"],
            "date_commented": to_iso_utc(comment["date_commented"]),
            "author": make_expected_author(author),
        })
    return expected


def make_malicious_article(user):
    malicious_article = {
        "id": 911,
        "style": "How-to",
        "date_published": datetime.now(timezone.utc),
        "title": 'Naughty naughty very naughty <script>alert("xss");</script>',
        "author_id": user["id"],
        "content": 'Bad image <img src="https://url.to.file.which/does-not.exist" onerror="alert(document.cookie);">. But not <strong>all</strong> bad.',
    }
    expected_article = {
        **make_expected_article([user], malicious_article),
        "title": 'Naughty naughty very naughty &lt;script&gt;alert("xss");&lt;/script&gt;',
        "content": 'Bad image <img src="https://url.to.file.which/does-not.exist">. But not <strong>all</strong> bad.',
    }
    return malicious_article, expected_article


def make_auth_header(user_name, password):
    token = base64.b64encode(f"{user_name}:{password}".encode("utf-8")).decode("ascii")
    return {"Authorization": f"Basic {token}"}


def auth_for(user):
    return make_auth_header(user["user_name"], user["password"])


async def seed_users(db, users):
    db.add_all([
        User(
            id=u["id"],
            user_name=u["user_name"],
            full_name=u["full_name"],
            nickname=u["nickname"],
            password=hash_password(u["password"]),
            date_created=u["date_created"],
        )
        for u in users
    ])
    await db.commit()


async def seed_articles_tables(db, users, articles, comments=()):
    await seed_users(db, users)
    db.add_all([
        Article(**{**a, "style": ArticleStyle(a["style"])})
        for a in articles
    ])
    await db.commit()
    if comments:
        db.add_all([Comment(**c) for c in comments])
        await db.commit()


async def seed_malicious_article(db, user, article):
    await seed_users(db, [user])
    db.add(Article(**{**article, "style": ArticleStyle(article["style"])}))
    await db.commit()
