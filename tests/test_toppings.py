from cupviz.core.toppings import bucket_for, classify_toppings

def test_first_matching_rule_wins():
    buckets = classify_toppings(["Oat Milk Powder"])
    assert buckets.milk == ("Oat Milk Powder",)
    assert buckets.powder == ()

def test_single_toppings_land_in_expected_bucket():
    assert classify_toppings(["Caramel Syrup"]).syrup == ("Caramel Syrup",)
    assert classify_toppings(["Cinnamon Powder"]).powder == ("Cinnamon Powder",)
    assert classify_toppings(["Whipped Cream"]).milk == ("Whipped Cream",)
    assert classify_toppings(["Brown Sugar"]).syrup == ("Brown Sugar",)
    assert classify_toppings(["Pumpkin Spice"]).powder == ("Pumpkin Spice",)
    assert classify_toppings(["Boba Pearls"]).other == ("Boba Pearls",)

def test_every_topping_lands_in_exactly_one_bucket_in_order():
    toppings = ["sprinkles", "Cocoa", "vanilla syrup", "cold cream", "jelly", "Sweetener"]
    buckets = classify_toppings(toppings)

    assert buckets.milk == ("cold cream",)
    assert buckets.syrup == ("vanilla syrup", "Sweetener")
    assert buckets.powder == ("Cocoa",)
    assert buckets.other == ("sprinkles", "jelly")
    total = len(buckets.milk) + len(buckets.syrup) + len(buckets.powder) + len(buckets.other)
    assert total == len(toppings)

def test_empty_toppings():
    buckets = classify_toppings([])
    assert buckets.milk == buckets.syrup == buckets.powder == buckets.other == ()

def test_bucket_for_is_case_insensitive():
    assert bucket_for("CREAM cheese foam") == 'milk'
    assert bucket_for("marshmallow") is None
