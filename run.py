# run.py

import logging

from mmcsim.analytical import mmc
from mmcsim.scenarios import compare_scenarios, default_scenarios, run_scenario
from mmcsim.simulation import simulate_from_text

logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

# =====================================================
# 1️⃣ Random-draw runs (scenario A vs B)
# =====================================================
params_a, params_b = default_scenarios()

res_a = run_scenario(params_a, seed=42)
res_b = run_scenario(params_b, seed=42)

print("=== Scenario A (first 5 customers) ===")
for e in res_a.entities[:5]:
    print(e)

for name, params, res in [("A", params_a, res_a), ("B", params_b, res_b)]:
    print(f"\n=== Scenario {name}: {params.num_servers} servers ===")
    print(f"customers:        {res.total_entities}")
    print(f"avg wait (min):   {res.avg_wait_time:.2f}")
    print(f"max wait (min):   {res.max_wait_time:.2f}")
    print(f"queue length:     {res.avg_queue_length:.2f}")
    print(f"utilization (%):  {res.server_utilization:.2f}")

print("\n=== Comparison ===")
cmp = compare_scenarios(res_a, res_b)
for row in cmp.rows:
    print(f"{row.metric:<20} A={row.scenario_a:<10} B={row.scenario_b:<10} Δ={row.difference}")
print("wait status:", cmp.wait_status_a, "->", cmp.wait_status_b)
print("utilization status:", cmp.utilization_status_a, "->", cmp.utilization_status_b)

# =====================================================
# 2️⃣ Analytical M/M/c baseline
# =====================================================
print("\n=== Analytical M/M/c ===")
print(mmc(params_a.arrival_rate, params_a.service_rate, params_a.num_servers))
print(mmc(params_b.arrival_rate, params_b.service_rate, params_b.num_servers))

# =====================================================
# 3️⃣ Dataset replay
# =====================================================
csv_text = "iat;service_time\n0;2.5\n1.2;3.1\n0.4;1.7\nbad;row\n2.0;0.9\n"
res_d = simulate_from_text(csv_text, num_servers=2)

print("\n=== Dataset replay (2 servers) ===")
for e in res_d.entities:
    print(e)
print("dropped rows:", res_d.dropped_rows)
