import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from storefront.params import parse_search_params
from storefront.search.text import highlight
from storefront.services.search_service import SearchService


def main() -> None:
    service = SearchService()
    stats = service.stats()
    print(f"catalog={stats.stock.total} price_range=[{stats.price_range.min}, {stats.price_range.max}]")
    print(f"categories={stats.category_counts} popular_tags={stats.popular_tags[:5]}")
    print("---")
    for raw in [
        {"q": "bread"},
        {"q": "12% protein", "categories": "flour"},
        {"q": "banetton"},
        {"q": "steam-injection oven"},
        {"q": "", "categories": "oven", "inStock": "true"},
        {"q": "flour", "organic": "true"},
    ]:
        params = parse_search_params(raw)
        results = service.search_results(params)
        print(f"params={raw} results={len(results)}")
        for item in results[:3]:
            print(f"- {highlight(item.product.name, params.query, marker='*')} | score={item.score} | rating={item.product.rating}")
        print("---")


if __name__ == "__main__":
    main()
