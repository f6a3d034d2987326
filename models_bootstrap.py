# models_bootstrap.py
from employee import models as _employee_models
from task import models as _task_models
