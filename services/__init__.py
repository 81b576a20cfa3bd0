"""
Services Package

- submission_controller: session state and the submit workflow
- form_validator: HMRC submission rules
- identity_provider: simulated Government Gateway
- submission_errors: error kinds
- submission_config: constants and runtime settings
"""
