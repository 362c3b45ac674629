RESULTS_BASE_PATH = 'results/'
COUNTING_SORT_PATH = 'counting_sort/'
ROTATION_PATH = 'rotation/'
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
RESULT_CSV_HEADER = "Run,Timestamp,Time(s),Size,MElementsPerSec\n"
