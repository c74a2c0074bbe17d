"""StudyTasks backend server package."""
