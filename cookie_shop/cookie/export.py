# cookie_shop/cookie/export.py
from io import BytesIO

import pandas as pd

from ..model import Cookie

COLUMNS = [
    "ID", "Name", "Description", "Background Color", "Image", "Stock",
    "Rating", "Rating Count", "Calories", "Protein", "Fat", "Carbs",
    "Allergens", "Review Count", "Created At", "Updated At",
]


def cookies_frame() -> pd.DataFrame:
    """One row per cookie, nutrition flattened into columns."""
    rows = []
    for c in Cookie.query.order_by(Cookie.id.asc()).all():
        nutrition = c.nutrition if isinstance(c.nutrition, dict) else {}
        rows.append({
            "ID": c.id,
            "Name": c.name,
            "Description": c.description,
            "Background Color": c.bg_color,
            "Image": c.image,
            "Stock": c.stock,
            "Rating": c.rating,
            "Rating Count": c.rating_count,
            "Calories": nutrition.get("calories"),
            "Protein": nutrition.get("protein"),
            "Fat": nutrition.get("fat"),
            "Carbs": nutrition.get("carbs"),
            "Allergens": ", ".join(str(a) for a in c.allergens or []),
            "Review Count": len(c.top_reviews or []),
            "Created At": c.created_at,
            "Updated At": c.updated_at,
        })
    return pd.DataFrame(rows, columns=COLUMNS)


def cookies_csv() -> BytesIO:
    output = BytesIO()
    output.write(cookies_frame().to_csv(index=False).encode("utf-8"))
    output.seek(0)
    return output
