import streamlit as st
import requests
import os

# Configuration
API_URL = os.getenv("API_URL", "http://127.0.0.1:8000")
API_DOCS_URL = os.getenv("API_DOCS_URL", f"{API_URL}/docs")

st.set_page_config(page_title="Kitchen Scaler", layout="wide")

col1, col2 = st.columns([5, 1])
with col1:
    st.title("Recipe Scaler")
with col2:
    st.link_button("API Docs", API_DOCS_URL, type="secondary", use_container_width=True)
st.markdown("""
Paste your ingredient list, one ingredient per line, and pick the servings you need.

**Examples:**
- *2 cups flour*
- *Baking powder 2½tsp*
- *Butter (2 tbsp, softened)*
""")

# Input Section
recipe_text = st.text_area("Ingredients:", height=220, placeholder="2 cups flour\n3 eggs\n1 tsp vanilla ext.")
c1, c2 = st.columns(2)
with c1:
    original_yield = st.number_input("Original servings", min_value=0.0, value=4.0, step=1.0)
with c2:
    desired_yield = st.number_input("Desired servings", min_value=0.0, value=8.0, step=1.0)

if st.button("Scale Recipe", type="primary"):
    if not recipe_text.strip():
        st.warning("Please paste some ingredients first.")
    else:
        try:
            response = requests.post(f"{API_URL}/api/scale", json={
                "text": recipe_text,
                "original_yield": original_yield,
                "desired_yield": desired_yield
            })

            if response.status_code == 200:
                data = response.json()
                st.success(f"From {data['original_yield']:g} to {data['desired_yield']:g} servings")
                for line in data["lines"]:
                    ingredient = line["ingredient"]
                    left, right = st.columns([4, 1])
                    with left:
                        st.markdown(f"**{ingredient['name']}**")
                        st.caption(f"Original: {line['original_display']}")
                    with right:
                        st.markdown(f"### {line['display']}")
            else:
                detail = response.json()
                detail = detail.get("detail", detail)
                st.error(detail.get("message", response.text) if isinstance(detail, dict) else response.text)

        except requests.exceptions.ConnectionError:
            st.error("Could not connect to the API. Is the backend running? (`uvicorn kitchen_scaler.main:app`)")

st.divider()
st.subheader("Ingredient Converter")
k1, k2, k3, k4 = st.columns(4)
with k1:
    value = st.number_input("Amount", min_value=0.0, value=1.0)
with k2:
    from_unit = st.text_input("From unit", value="cup")
with k3:
    to_unit = st.text_input("To unit", value="g")
with k4:
    ingredient = st.text_input("Ingredient", value="flour")

if st.button("Convert"):
    try:
        response = requests.post(f"{API_URL}/api/convert", json={
            "value": value,
            "from_unit": from_unit,
            "to_unit": to_unit,
            "ingredient": ingredient or "water"
        })
        if response.status_code == 200:
            data = response.json()
            density_note = f" (density {data['density']} g/ml)" if data.get("density") else ""
            st.info(f"{value:g} {from_unit} {ingredient} = {data['result']:.2f} {to_unit}{density_note}")
        else:
            st.error(f"Error {response.status_code}: {response.text}")
    except requests.exceptions.ConnectionError:
        st.error("Could not connect to the API. Is the backend running?")
