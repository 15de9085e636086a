"""Pattern implementations grouped by the classic creational/structural/behavioral split."""
