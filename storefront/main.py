from __future__ import annotations

import gradio as gr

from storefront.catalog.facets import stock_status
from storefront.config import settings
from storefront.schemas import CATEGORIES, FilterParams, ScoredResult
from storefront.search.pipeline import sort_products
from storefront.search.text import highlight
from storefront.services.search_service import SearchService

service = SearchService()

TRISTATE = {"Any": None, "Yes": True, "No": False}
SORT_LABELS = {
    "Relevance": "relevance",
    "Price: low to high": "price-asc",
    "Price: high to low": "price-desc",
    "Rating": "rating",
}
STOCK_LABELS = {"in": "In stock", "low": "Low stock", "out": "Out of stock"}


def build_params(
    query: str,
    categories: list[str] | None,
    min_price: float,
    max_price: float,
    min_rating: float,
    in_stock: str,
    organic: str,
    logic_mode: str,
) -> FilterParams:
    return FilterParams(
        query=query or "",
        categories=frozenset(categories or []),
        min_price=float(min_price),
        max_price=float(max_price),
        min_rating=float(min_rating),
        in_stock=TRISTATE.get(in_stock),
        organic=TRISTATE.get(organic),
        logic_mode="OR" if logic_mode == "OR" else "AND",
    )


def format_results(results: list[ScoredResult], query: str, sort_label: str) -> str:
    if not results:
        return "No products match your search. Try a different query or loosen the filters."

    by_id = {r.product.id: r for r in results}
    ordered = sort_products([r.product for r in results], SORT_LABELS.get(sort_label, "relevance"))
    lines = [f"**{len(ordered)} products**", ""]
    for product in ordered:
        result = by_id[product.id]
        name = highlight(product.name, query) if query.strip() else product.name
        score = f" | score={result.score}" if query.strip() else ""
        lines.append(
            f"- {name} ({product.brand}) | ${product.price:,.2f} | "
            f"{product.rating:.1f}★ ({product.review_count}) | {STOCK_LABELS[stock_status(product)]}{score}"
        )
    return "\n".join(lines)


def search_fn(
    query: str,
    categories: list[str] | None,
    min_price: float,
    max_price: float,
    min_rating: float,
    in_stock: str,
    organic: str,
    logic_mode: str,
    sort_label: str,
) -> tuple[str, str]:
    params = build_params(query, categories, min_price, max_price, min_rating, in_stock, organic, logic_mode)
    results = service.search_results(params)
    suggestions = service.suggestions(params, ranked=[r.product for r in results])
    if settings.debug_log:
        print(f"[DEBUG][UI] query='{params.query}' results={len(results)} suggestions={len(suggestions)}")
    hint = ""
    if suggestions:
        hint = "Suggestions: " + " · ".join(s.text for s in suggestions)
    return format_results(results, params.query, sort_label), hint


def autocomplete_fn(
    query: str,
    categories: list[str] | None,
    min_price: float,
    max_price: float,
    min_rating: float,
    in_stock: str,
    organic: str,
    logic_mode: str,
) -> str:
    params = build_params(query, categories, min_price, max_price, min_rating, in_stock, organic, logic_mode)
    matches = service.autocomplete(params)
    if not matches:
        return ""
    return "Matching products: " + " · ".join(f"{m.name} ({m.category})" for m in matches)


def build_demo() -> gr.Blocks:
    stats = service.stats()
    low, high = stats.price_range.min, stats.price_range.max
    with gr.Blocks(title="Bakery Supply Storefront") as demo:
        gr.Markdown(
            """
            # Bakery Supply Storefront
            Search flours, bannetons and ovens. Typos are tolerated, and queries like
            "12% protein" or "steam-injection" boost matching flours and ovens.
            """
        )
        with gr.Row():
            query = gr.Textbox(label="Search", placeholder="bread flour, oval banneton, deck oven...", scale=4)
            sort = gr.Dropdown(choices=list(SORT_LABELS), value="Relevance", label="Sort by", scale=1)
        autocomplete = gr.Markdown()
        suggestions = gr.Markdown()
        with gr.Row():
            with gr.Column(scale=1):
                categories = gr.CheckboxGroup(
                    choices=list(CATEGORIES),
                    label="Categories",
                    info=", ".join(f"{k}: {v}" for k, v in stats.category_counts.items()),
                )
                logic = gr.Radio(choices=["AND", "OR"], value="AND", label="Filter logic")
                min_price = gr.Slider(minimum=low, maximum=high, value=low, step=1, label="Min price")
                max_price = gr.Slider(minimum=low, maximum=high, value=high, step=1, label="Max price")
                min_rating = gr.Slider(minimum=0, maximum=5, value=0, step=0.5, label="Minimum rating")
                in_stock = gr.Dropdown(choices=list(TRISTATE), value="Any", label="In stock")
                organic = gr.Dropdown(choices=list(TRISTATE), value="Any", label="Organic (flour only)")
            with gr.Column(scale=3):
                results = gr.Markdown()

        inputs = [query, categories, min_price, max_price, min_rating, in_stock, organic, logic, sort]
        outputs = [results, suggestions]
        query.submit(search_fn, inputs=inputs, outputs=outputs)
        for control in inputs[1:]:
            control.change(search_fn, inputs=inputs, outputs=outputs)
        query.change(autocomplete_fn, inputs=inputs[:-1], outputs=[autocomplete])
        demo.load(search_fn, inputs=inputs, outputs=outputs)
    return demo


if __name__ == "__main__":
    app = build_demo()
    app.launch(server_name=settings.gradio_server_name, server_port=settings.gradio_server_port)
