"""Construction stages: feature draw, line selection and grid marking."""
