from src.decision.facade import DecisionFacade, DecisionReport, OpportunityAssessment

__all__ = ["DecisionFacade", "DecisionReport", "OpportunityAssessment"]
