import random

from framepyground import Dataframe

rng = random.Random(3)
shops = Dataframe.from_records(
    {
        "City": rng.choice(["Rome", "Milan", "Turin"]),
        "Shop Name": f"Shop {idx}",
        "Employees": rng.randint(2, 20),
        "Revenue": rng.randint(1000, 5000) if idx != 7 else 90000,
        "Open": rng.random() > 0.2,
    }
    for idx in range(12)
)

shops.print("All Shops")

shops \
  .select(lambda row: row["City"] == "Rome") \
  .sort("Revenue", ascending=False) \
  .print("Shops in Rome")

shops.outlier(2).print("Without outliers")

per_employee = shops.amend("Revenue per Employee", lambda row: row["Revenue"] / row["Employees"])
per_employee.digits(1).print("Revenue per Employee")

per_employee.correlation_matrix(per_employee.include(["Revenue"])).print("Correlations")
