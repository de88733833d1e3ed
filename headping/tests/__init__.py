"""Test suite for headping.

Organized into three categories:

1. core/: Unit tests for the probe loop and domain models
   - No network access, fast execution
   - Uses in-memory fakes for ports

2. adapters/: Tests for adapter implementations
   - httpx requester against httpx.MockTransport
   - stdout formatting, target list, argument parsing

3. fakes/: Port implementations for testing
   - In-memory implementations of RequesterPort and ReportPort
   - Used by core unit tests
"""
