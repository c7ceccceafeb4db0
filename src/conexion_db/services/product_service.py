"""
CRUD operations on the productos table.

Each operation opens its own connection, runs a single statement and
commits it. On failure the transaction is rolled back and the driver error
is re-raised as QueryError.
"""

from contextlib import closing, contextmanager
from typing import Any, Iterator, List, Optional, Sequence

from ..config_manager import DbConfig
from ..database_service import (
    DriverResolver,
    database_errors,
    describe_database_error,
    open_connection,
    resolve_driver,
)
from ..exceptions import DatabaseConnectionError, DatabaseFailure, QueryError
from ..logger import log_only
from ..models.product import Product

TABLE_NAME = "productos"
COLUMNS = ("id_producto", "nombre", "precio", "stock")

PARAM_MARKERS = {"qmark": "?", "format": "%s", "pyformat": "%s"}


class ProductService:
    """Product persistence through a DB-API driver"""

    def __init__(self, config: DbConfig, resolver: DriverResolver = resolve_driver):
        self.config = config
        # DriverResolutionError propagates to the caller
        self.driver = resolver(config.driver_name)
        self._errors = database_errors(self.driver)
        self.marker = PARAM_MARKERS.get(getattr(self.driver, "paramstyle", ""), "%s")

    def _placeholders(self, count: int) -> str:
        return ", ".join([self.marker] * count)

    @contextmanager
    def _connection(self) -> Iterator[Any]:
        try:
            conn = open_connection(self.driver, self.config)
        except DatabaseFailure:
            raise
        except self._errors as e:
            raise DatabaseConnectionError(describe_database_error(e)) from e

        with closing(conn):
            yield conn

    def _execute(
        self, query: str, params: Sequence = (), fetch: Optional[str] = None
    ) -> Any:
        """
        Execute one statement in its own connection.

        Args:
            query: SQL text with driver placeholders
            params: Bound parameters
            fetch: "one", "all" or None for the affected row count

        Returns:
            The fetched row(s) or the affected row count
        """
        with self._connection() as conn:
            try:
                with closing(conn.cursor()) as cursor:
                    cursor.execute(query, tuple(params))
                    if fetch == "one":
                        result = cursor.fetchone()
                    elif fetch == "all":
                        result = cursor.fetchall()
                    else:
                        result = cursor.rowcount
                conn.commit()
                return result
            except self._errors as e:
                reason = describe_database_error(e)
                log_only(f"Statement failed on {TABLE_NAME}: {reason}", "ERROR")
                try:
                    conn.rollback()
                except self._errors as rollback_error:
                    log_only(
                        f"Rollback failed: {describe_database_error(rollback_error)}",
                        "ERROR",
                    )
                raise QueryError(reason) from e

    def create_product(self, product: Product) -> None:
        """Insert a new product"""
        query = (
            f"INSERT INTO {TABLE_NAME} ({', '.join(COLUMNS)}) "
            f"VALUES ({self._placeholders(len(COLUMNS))})"
        )
        self._execute(
            query,
            (product.id_producto, product.nombre, product.precio, product.stock),
        )
        log_only(f"Created product {product.id_producto}")

    def get_product(self, id_producto: str) -> Optional[Product]:
        """Get a product by id, or None if it does not exist"""
        query = (
            f"SELECT {', '.join(COLUMNS)} FROM {TABLE_NAME} "
            f"WHERE id_producto = {self.marker}"
        )
        row = self._execute(query, (id_producto,), fetch="one")
        return Product.from_row(row) if row else None

    def list_products(self) -> List[Product]:
        """Get all products ordered by id"""
        query = f"SELECT {', '.join(COLUMNS)} FROM {TABLE_NAME} ORDER BY id_producto"
        rows = self._execute(query, fetch="all")
        return [Product.from_row(row) for row in rows]

    def update_product(self, product: Product) -> bool:
        """
        Update name, price and stock of an existing product

        Returns:
            bool: True if a row was updated
        """
        query = (
            f"UPDATE {TABLE_NAME} SET nombre = {self.marker}, precio = {self.marker}, "
            f"stock = {self.marker} WHERE id_producto = {self.marker}"
        )
        rows_affected = self._execute(
            query,
            (product.nombre, product.precio, product.stock, product.id_producto),
        )
        log_only(f"Updated product {product.id_producto}: {rows_affected} row(s)")
        return rows_affected > 0

    def delete_product(self, id_producto: str) -> bool:
        """Delete a product, returns True if a row was deleted"""
        query = f"DELETE FROM {TABLE_NAME} WHERE id_producto = {self.marker}"
        rows_affected = self._execute(query, (id_producto,))
        log_only(f"Deleted product {id_producto}: {rows_affected} row(s)")
        return rows_affected > 0
