"""
Seed content written when no document exists yet.

The sample set gives a fresh installation something to show on every
endpoint: one highlight, two articles, one image, three sources and two
trending topics.  Like counters and feedback start empty.
"""

from typing import Any, Dict

from .utils import utcnow_iso


def build_seed_document() -> Dict[str, Any]:
    """Return a new seed document stamped with the current time."""
    now = utcnow_iso()
    return {
        "highlights": [
            {
                "id": "h1",
                "title": "Destaque: Economia global em foco",
                "summary": "Resumo do destaque.",
                "image": "https://picsum.photos/seed/hl1/800/450",
                "url": "https://exemplo.com/destaque-1",
                "publishedAt": now,
                "sourceId": "s1",
            },
        ],
        "news": [
            {
                "id": "n1",
                "title": "Mercados subiram hoje",
                "summary": "Resumo da notícia de mercado.",
                "url": "https://noticias.ex/n1",
                "image": "https://picsum.photos/seed/n1/400/300",
                "publishedAt": now,
                "sourceId": "s1",
            },
            {
                "id": "n2",
                "title": "Tecnologia: nova versão lançada",
                "summary": "Resumo da notícia tech.",
                "url": "https://noticias.ex/n2",
                "image": "https://picsum.photos/seed/n2/400/300",
                "publishedAt": now,
                "sourceId": "s2",
            },
        ],
        "images": [
            {
                "id": "img1",
                "title": "Paisagem",
                "url": "https://picsum.photos/seed/img1/1200/800",
                "thumb": "https://picsum.photos/seed/img1/400/300",
                "sourceId": "s3",
            },
        ],
        "sources": [
            {"id": "s1", "name": "Exemplo News", "url": "https://noticias.ex"},
            {"id": "s2", "name": "TechToday", "url": "https://techtoday.ex"},
            {"id": "s3", "name": "Pics", "url": "https://picsum.photos"},
        ],
        "trending": [
            {"id": "t1", "topic": "Economia", "score": 92},
            {"id": "t2", "topic": "IA", "score": 88},
        ],
        "likes": {"articles": {}, "images": {}},
        "feedback": [],
        "createdAt": now,
    }
