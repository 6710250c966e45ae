"""Pydantic schemas for API responses."""

from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime


class RuleInfo(BaseModel):
    """One shortcut in the rule set."""
    
    key: str = Field(..., description="Shortcut key")
    kind: str = Field(..., description="'template' or 'code'")
    target: Optional[str] = Field(None, description="URL template or code rule name")
    fallback: bool = Field(False, description="Whether this is the fallback rule")


class RulesResponse(BaseModel):
    """Listing of the loaded rule set."""
    
    count: int
    has_fallback: bool
    rules: List[RuleInfo]
    
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "count": 2,
                    "has_fallback": True,
                    "rules": [
                        {"key": "m", "kind": "template", "target": "https://gmail.com/", "fallback": False},
                        {"key": "_", "kind": "template", "target": "https://www.google.com/search?q={ALL}", "fallback": True},
                    ]
                }
            ]
        }
    }


class ResolveResponse(BaseModel):
    """Result of resolving a query without redirecting."""
    
    query: str = Field(..., description="The query as received")
    command: str = Field(..., description="First token of the query")
    args: List[str] = Field(default_factory=list, description="Remaining tokens")
    key: str = Field(..., description="Key of the rule that handled the query")
    fallback: bool = Field(..., description="Whether the fallback rule was used")
    target: str = Field(..., description="Destination URI")


class HealthResponse(BaseModel):
    """Health check response."""
    
    status: str = Field(..., description="Overall status")
    rules: int = Field(..., description="Number of loaded rules")
    timestamp: datetime = Field(..., description="Check timestamp")


class ErrorResponse(BaseModel):
    """Error response."""
    
    error: str = Field(..., description="Error message")
    detail: Optional[str] = Field(None, description="Detailed error information")
