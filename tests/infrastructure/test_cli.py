"""End-to-end tests for the click CLI, driven through CliRunner."""

from click.testing import CliRunner

from shopcart.infrastructure.cli.main import cli


def _run(args, stdin=None):
    return CliRunner().invoke(cli, args, input=stdin)


class TestProductsCommand:

    def test_lists_classic_catalog(self):
        result = _run(["products"])
        assert result.exit_code == 0
        assert "Book" in result.output
        assert "$800.00" in result.output

    def test_seed_option(self):
        result = _run(["--seed", "electronics", "products"])
        assert result.exit_code == 0
        assert "Keyboard" in result.output
        assert "Book" not in result.output

    def test_seed_from_environment(self):
        result = CliRunner(env={"SHOPCART_SEED": "electronics"}).invoke(cli, ["products"])
        assert "Mouse" in result.output


class TestExportCommand:

    def test_writes_flat_file(self, tmp_path):
        target = tmp_path / "inv.txt"
        result = _run(["export", "--output", str(target)])
        assert result.exit_code == 0
        assert "Exported 3 products" in result.output
        assert target.read_text(encoding="utf-8").splitlines() == [
            "1,Book,10.5,10",
            "2,Pen,2.5,20",
            "3,Laptop,800,5",
        ]

    def test_output_from_environment(self, tmp_path):
        target = tmp_path / "env.txt"
        result = CliRunner(env={"SHOPCART_EXPORT_FILE": str(target)}).invoke(cli, ["export"])
        assert result.exit_code == 0
        assert target.read_text(encoding="utf-8").startswith("1,Book,10.5,10")


class TestDemoCommand:

    def test_scripted_purchase(self):
        result = _run(["--user", "Alice", "--seed", "electronics", "demo"])
        assert result.exit_code == 0
        assert "Welcome Alice (User)" in result.output
        assert "Cart total: $30.00" in result.output
        assert "Order #1 Summary:" in result.output
        assert "Items: 2" in result.output
        assert "Cart is empty." in result.output

    def test_user_from_environment(self):
        env = {"SHOPCART_USER": "Dana", "SHOPCART_ADMIN": "1"}
        result = CliRunner(env=env).invoke(cli, ["demo"])
        assert result.exit_code == 0
        assert "Welcome Dana (Admin)" in result.output

    def test_declined_card(self):
        result = _run(["demo", "--card", ""])
        assert result.exit_code != 0
        assert "declined" in result.output

    def test_too_many_units(self):
        result = _run(["demo", "--quantity", "99"])
        assert result.exit_code != 0
        assert "Could not add" in result.output


class TestShopMenu:

    def test_greets_and_exits(self):
        result = _run(["--user", "Alice", "shop"], "0\n")
        assert result.exit_code == 0
        assert "Welcome, Alice (User)" in result.output
        assert "Goodbye!" in result.output

    def test_add_view_and_checkout_by_card(self):
        stdin = "\n".join([
            "2", "1", "3",          # add 3 x Book
            "3",                    # view cart
            "4", "1", "4111", "",   # checkout by card, default name
            "3",                    # cart now empty
            "0",
        ]) + "\n"
        result = _run(["--user", "Alice", "shop"], stdin)

        assert result.exit_code == 0
        assert "Book x3 = $31.50" in result.output
        assert "Order #1 Summary:" in result.output
        assert "Total: $31.50" in result.output
        assert "Cart is empty." in result.output

    def test_empty_cart_checkout(self):
        result = _run(["shop"], "4\n0\n")
        assert "Cart is empty!" in result.output
        assert "1. Card 2. PayPal" not in result.output

    def test_declined_paypal_keeps_cart(self):
        stdin = "2\n2\n1\n4\n2\n\n3\n0\n"
        result = _run(["shop"], stdin)
        assert result.exit_code == 0
        assert "Error: PayPal payment of $2.50 was declined" in result.output
        assert "Pen x1 = $2.50" in result.output

    def test_insufficient_stock(self):
        result = _run(["shop"], "2\n3\n6\n3\n0\n")
        assert "Could not add to cart" in result.output
        assert "Cart is empty." in result.output

    def test_unknown_product(self):
        result = _run(["shop"], "2\n42\n1\n0\n")
        assert "Error: Product #42 not found" in result.output

    def test_remove_restocks(self):
        result = _run(["shop"], "2\n1\n4\n5\n1\n1\n0\n")
        assert "4 returned to stock" in result.output
        assert "Book" in result.output

    def test_guest_cannot_use_admin_entries(self):
        result = _run(["shop"], "8\n0\n")
        assert "Unknown choice." in result.output
        assert "Set Price" not in result.output

    def test_show_order_by_id(self):
        stdin = "2\n2\n4\n4\n1\n4111\n\n7\n1\n0\n"
        result = _run(["shop"], stdin)
        assert result.exit_code == 0
        assert result.output.count("Order #1 Summary:") == 2
        assert "Items: 4" in result.output
        assert "Total: $10.00" in result.output

    def test_show_unknown_order(self):
        result = _run(["shop"], "7\n3\n0\n")
        assert result.exit_code == 0
        assert "Error: Order #3 not found" in result.output


class TestAdminMenu:

    def test_admin_sees_admin_entries(self):
        result = _run(["--admin", "shop"], "0\n")
        assert "11. Export Catalog" in result.output

    def test_set_price_and_stock(self):
        result = _run(["--admin", "shop"], "9\n2\n3.00\n10\n2\n7\n1\n0\n")
        assert "price updated to $3.00" in result.output
        assert "stock set to 7" in result.output

    def test_negative_price_is_reported(self):
        result = _run(["--admin", "shop"], "9\n1\n-5\n0\n")
        assert result.exit_code == 0
        assert "Error: Money amount cannot be negative" in result.output

    def test_add_product_and_export(self, tmp_path):
        target = tmp_path / "dump.txt"
        stdin = f"8\n4\nLamp\n19.99\n2\n11\n{target}\n0\n"
        result = _run(["--admin", "shop"], stdin)
        assert result.exit_code == 0
        assert "Exported 4 products" in result.output
        assert target.read_text(encoding="utf-8").endswith("4,Lamp,19.99,2\n")
