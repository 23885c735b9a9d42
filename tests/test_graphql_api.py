"""Tests for the GraphQL gateway.

These tests verify:
- Operation and field names exposed by the schema
- Queries and mutations dispatch to the resolvers through the context store
- Storage errors surface as GraphQL errors, masked when configured
- The FastAPI app serves /graphql and /health and manages the store lifecycle
"""

import pytest
from fastapi.testclient import TestClient

from src.api import create_app
from src.api.schema import create_schema
from tests.fakes import FakeCatalogStore

PRODUCT_FIELDS = "id name price quantity tags"

CREATE_PRODUCT = f"""
mutation Create($product: ProductInput!) {{
    createProduct(product: $product) {{ {PRODUCT_FIELDS} }}
}}
"""

GET_PRODUCT = f"""
query Get($id: String!) {{
    getProduct(id: $id) {{ {PRODUCT_FIELDS} }}
}}
"""

SEARCH_PRODUCTS = f"""
query Search($term: String!) {{
    getAllProductsWithTerm(term: $term) {{ {PRODUCT_FIELDS} }}
}}
"""

UPDATE_PRODUCT = f"""
mutation Update($id: String!, $product: ProductInput!) {{
    updateProduct(id: $id, product: $product) {{ {PRODUCT_FIELDS} }}
}}
"""

SET_QUANTITY = """
mutation SetQuantity($id: String!, $quantity: Int!) {
    setQuantity(id: $id, quantity: $quantity)
}
"""

DELETE_PRODUCT = """
mutation Delete($id: String!) {
    deleteProduct(id: $id)
}
"""


class TestSchema:
    """Test the GraphQL schema through direct execution."""

    @pytest.fixture
    def schema(self):
        return create_schema()

    @pytest.fixture
    def execute(self, schema, fake_store):
        async def _execute(query, **variables):
            return await schema.execute(
                query,
                variable_values=variables,
                context_value={"store": fake_store},
            )
        return _execute

    def test_schema_exposes_operations(self, schema):
        sdl = schema.as_str()

        for name in ("getProduct", "getAllProductsWithTerm"):
            assert name in sdl
        for name in ("createProduct", "deleteProduct", "updateProduct", "setQuantity"):
            assert name in sdl
        assert "input ProductInput" in sdl
        assert "type Product" in sdl

    @pytest.mark.asyncio
    async def test_create_returns_minted_id(self, execute, fake_store, widget):
        result = await execute(CREATE_PRODUCT, product=widget)

        assert result.errors is None
        created = result.data["createProduct"]
        assert created["id"] in fake_store.documents
        assert {k: created[k] for k in widget} == widget
        assert fake_store.documents[created["id"]] == widget

    @pytest.mark.asyncio
    async def test_get_product(self, execute, fake_store, widget):
        fake_store.documents["p1"] = widget

        result = await execute(GET_PRODUCT, id="p1")

        assert result.errors is None
        assert result.data["getProduct"] == {"id": "p1", **widget}

    @pytest.mark.asyncio
    async def test_get_missing_product_returns_storage_error(self, execute):
        result = await execute(GET_PRODUCT, id="missing")

        assert result.data == {"getProduct": None}
        assert len(result.errors) == 1
        assert "does not exist" in result.errors[0].message

    @pytest.mark.asyncio
    async def test_search_returns_ordered_products(self, execute, fake_store):
        fake_store.documents["a"] = {"name": "TypeScript book", "price": 30.0, "quantity": 1, "tags": None}
        fake_store.documents["b"] = {"name": "TypeScript video", "price": 12.5, "quantity": 3, "tags": ["video"]}
        fake_store.search_results["typescript"] = ["b", "a"]

        result = await execute(SEARCH_PRODUCTS, term="typescript")

        assert result.errors is None
        names = [p["name"] for p in result.data["getAllProductsWithTerm"]]
        assert names == ["TypeScript video", "TypeScript book"]

    @pytest.mark.asyncio
    async def test_update_product_overwrites(self, execute, fake_store, widget):
        fake_store.documents["p1"] = widget

        result = await execute(UPDATE_PRODUCT, id="p1", product={"name": "Gadget"})

        assert result.errors is None
        assert result.data["updateProduct"]["name"] == "Gadget"
        assert fake_store.documents["p1"] == {"name": "Gadget", "price": None, "quantity": None, "tags": None}

    @pytest.mark.asyncio
    async def test_widget_scenario(self, execute, fake_store, widget):
        created = await execute(CREATE_PRODUCT, product=widget)
        product_id = created.data["createProduct"]["id"]

        result = await execute(SET_QUANTITY, id=product_id, quantity=10)
        assert result.data == {"setQuantity": True}

        result = await execute(GET_PRODUCT, id=product_id)
        assert result.data["getProduct"] == {
            "id": product_id,
            "name": "Widget",
            "price": 9.99,
            "quantity": 10,
            "tags": ["new"],
        }

        result = await execute(DELETE_PRODUCT, id=product_id)
        assert result.data == {"deleteProduct": True}

        result = await execute(GET_PRODUCT, id=product_id)
        assert result.errors is not None

    @pytest.mark.asyncio
    async def test_delete_missing_product_is_an_error_not_false(self, execute):
        result = await execute(DELETE_PRODUCT, id="missing")

        assert result.data is None
        assert result.errors is not None

    @pytest.mark.asyncio
    async def test_invalid_argument_type_rejected_before_resolver(self, execute, fake_store):
        result = await execute(SET_QUANTITY, id="p1", quantity="ten")

        assert result.errors is not None
        assert fake_store.calls == []

    @pytest.mark.asyncio
    async def test_masked_errors_hide_storage_message(self, fake_store):
        schema = create_schema(mask_errors=True)

        result = await schema.execute(
            GET_PRODUCT,
            variable_values={"id": "missing"},
            context_value={"store": fake_store},
        )

        assert len(result.errors) == 1
        assert "does not exist" not in result.errors[0].message


class ConnectingFakeStore(FakeCatalogStore):
    """Fake store that records its connection lifecycle."""

    def __init__(self):
        super().__init__()
        self.connected = False
        self.closed = False

    async def __aenter__(self):
        self.connected = True
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        self.closed = True
        return False


class TestApp:
    """Test the FastAPI application."""

    @pytest.fixture
    def client(self, fake_store):
        with TestClient(create_app(store=fake_store)) as client:
            yield client

    def test_health_check(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_graphql_round_trip(self, client, fake_store, widget):
        response = client.post(
            "/graphql",
            json={"query": CREATE_PRODUCT, "variables": {"product": widget}},
        )

        assert response.status_code == 200
        product_id = response.json()["data"]["createProduct"]["id"]

        response = client.post(
            "/graphql",
            json={"query": GET_PRODUCT, "variables": {"id": product_id}},
        )
        assert response.json()["data"]["getProduct"]["name"] == "Widget"

    def test_graphql_error_payload(self, client):
        response = client.post(
            "/graphql",
            json={"query": GET_PRODUCT, "variables": {"id": "missing"}},
        )

        body = response.json()
        assert body["data"] == {"getProduct": None}
        assert "does not exist" in body["errors"][0]["message"]

    def test_lifespan_connects_store_from_config(self, monkeypatch):
        store = ConnectingFakeStore()

        import src.api as api_module

        monkeypatch.setattr(api_module, "get_config", lambda: object())
        monkeypatch.setattr(api_module.CatalogStore, "from_config", classmethod(lambda cls, config: store))

        with TestClient(create_app()) as client:
            assert store.connected
            assert client.app.state.catalog_store is store
            assert client.get("/health").status_code == 200

        assert store.closed
