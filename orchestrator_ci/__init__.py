"""
Script: orchestrator_ci package
What: Holds Python wrappers around the UiPath CLI (`uipcli`) used by CI pipelines.
Doing: Groups one module per pipeline step plus shared argument, credential and bootstrap code.
Why: Keeps secret masking and parameter mapping in one tested place instead of copied per script.
Goal: Pack, deploy, run jobs, run tests and manage assets against Orchestrator from CI.
"""
