from examples.schema_sync import NEW_COLUMNS, WIDENED_COLUMNS, build_sync_script, run_demo


def test_sync_script_is_wrapped_in_table_locks():
    statements = build_sync_script()
    assert statements[0] == "LOCK TABLES dim_customer WRITE;\n"
    assert statements[-1] == "UNLOCK TABLES"
    assert len(statements) == len(NEW_COLUMNS) + len(WIDENED_COLUMNS) + 3


def test_sync_script_column_statements():
    statements = build_sync_script()
    assert "ALTER TABLE dim_customer ADD country_code VARCHAR(2)" in statements
    assert "ALTER TABLE dim_customer ADD credit_limit DECIMAL(18, 2)" in statements
    assert "ALTER TABLE dim_customer ADD is_active CHAR(1)" in statements
    assert "ALTER TABLE dim_customer ADD valid_from DATETIME" in statements
    assert "ALTER TABLE dim_customer MODIFY name TEXT" in statements
    assert "insert into dim_customer(customer_tk, version) values (1, 1)" in statements


def test_run_demo_reports_connection():
    result = run_demo(host="gbase01", database="dw")
    assert result["driver"] == "com.gbase.jdbc.Driver"
    assert result["url"] == "jdbc:gbase://gbase01/dw?characterEncoding=utf8"
    assert result["statements"]
