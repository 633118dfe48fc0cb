from nestspec.testing.models.result import ExampleResult, Outcome, RunSummary


__all__ = ["ExampleResult", "Outcome", "RunSummary"]
