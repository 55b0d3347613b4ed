"""Output layer — plain, JSON, and Rich rendering of validation reports.

Output modules may import from report and config.  Nothing else in the
package imports from output.
"""
