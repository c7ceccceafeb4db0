"""
CRUD walkthrough on the productos table: create, read, update, delete.
"""

from decimal import Decimal

from ..config_manager import DbConfig
from ..database_service import DriverResolver, resolve_driver
from ..exceptions import DatabaseFailure, DriverResolutionError
from ..logger import print_normal, log_only
from ..models.outcome import Outcome
from ..models.product import Product
from .product_service import ProductService

DEMO_PRODUCT = Product(
    id_producto="DEMO-001", nombre="Producto de demostración", precio=Decimal("9.99"), stock=10
)


def _describe(product) -> str:
    if product is None:
        return "no encontrado"
    return (
        f"{product.id_producto} | {product.nombre} | "
        f"precio={product.precio} | stock={product.stock}"
    )


def run_crud_demo(config: DbConfig, resolver: DriverResolver = resolve_driver) -> Outcome:
    """
    Run create -> read -> update -> read -> delete -> read for DEMO_PRODUCT,
    after clearing any demo row left by an earlier run.

    Returns:
        Outcome: CONNECTED_WITH_RESULT with the demo product id on success
    """
    try:
        service = ProductService(config, resolver=resolver)
    except DriverResolutionError as e:
        log_only(f"Driver resolution failed: {e}", "ERROR")
        return Outcome.driver_not_found(str(e))

    product_id = DEMO_PRODUCT.id_producto
    try:
        # A previous interrupted run may have left the demo row behind
        if service.delete_product(product_id):
            log_only(f"Removed leftover demo product {product_id}")

        service.create_product(DEMO_PRODUCT)
        print_normal(f"Producto creado: {_describe(DEMO_PRODUCT)}")

        print_normal(f"Producto leído: {_describe(service.get_product(product_id))}")

        updated = Product(
            id_producto=product_id,
            nombre=f"{DEMO_PRODUCT.nombre} (actualizado)",
            precio=DEMO_PRODUCT.precio * 2,
            stock=DEMO_PRODUCT.stock + 5,
        )
        service.update_product(updated)
        print_normal(
            f"Producto actualizado: {_describe(service.get_product(product_id))}"
        )

        products = service.list_products()
        print_normal(f"Productos en la tabla: {len(products)}")

        service.delete_product(product_id)
        print_normal(
            f"Producto eliminado. Lectura posterior: "
            f"{_describe(service.get_product(product_id))}"
        )

    except DatabaseFailure as e:
        log_only(f"CRUD demo failed: {e}", "ERROR")
        return Outcome.connection_failed(str(e))

    return Outcome.connected_with_result(product_id)
