from .demand_loader import load_demand, load_demand_series
__all__=["load_demand", "load_demand_series"]
