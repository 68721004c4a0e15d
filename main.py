import json
import time

from pyedid.dumps.linux.display import fetch_display_info

start_time = time.time()
display_info = fetch_display_info()
end_time = time.time()
print("Display Discovery:", end_time - start_time)

json_data = json.loads(display_info.model_dump_json(exclude={"modules": {"__all__": {"edid"}}}))

print(json.dumps(json_data, indent=2))
